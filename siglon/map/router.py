from fastapi import APIRouter, Depends
from siglon.shared.utils import get_map_features
from siglon.shared.response import success_response
from siglon.shared.store import get_store

router = APIRouter()

@router.get("/")
async def get_map(store=Depends(get_store)):
    """
    Official events and pending citizen reports as one GeoJSON FeatureCollection.
    """
    collection = await get_map_features(store)
    return success_response(collection, "Map data fetched successfully")
