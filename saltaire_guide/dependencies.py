from typing import Annotated

from fastapi import Depends, Request

from saltaire_guide.services.directory import DirectoryService
from saltaire_guide.services.signups import ListingSignupService


def get_directory_service(request: Request) -> DirectoryService:
    return request.app.state.directory_service


def get_signup_service(request: Request) -> ListingSignupService:
    return request.app.state.signup_service


DirectoryDep = Annotated[DirectoryService, Depends(get_directory_service)]
SignupDep = Annotated[ListingSignupService, Depends(get_signup_service)]
