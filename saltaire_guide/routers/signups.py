from fastapi import APIRouter

from saltaire_guide.dependencies import SignupDep
from saltaire_guide.schemas.responses import SignupResponse
from saltaire_guide.schemas.signups import ListingSignupRequest

router = APIRouter()


@router.post("/api/listings", response_model=SignupResponse)
async def submit_listing(request: ListingSignupRequest, service: SignupDep) -> SignupResponse:
    return await service.submit(request)
