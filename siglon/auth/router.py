from fastapi import APIRouter, Request
from .models import AdminLogin
from .manager import login_admin
from siglon.shared.response import success_response

router = APIRouter()

@router.post("/login")
async def login(credentials: AdminLogin, request: Request):
    """Authenticate the administrator"""
    token = login_admin(credentials, request.app.state.settings)
    return success_response(token, "Login successful")
