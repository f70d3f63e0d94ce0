"""Animal routes - catalogue listing and adoption request CRUD."""
from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel

from ..database import create_connection
from ..dependencies import require_adopter, require_user
from .deps import get_adoption_service

router = APIRouter(tags=["animals"])


class AdoptionRequestInput(BaseModel):
    email: str
    notes: str


def serialize_adoption_request(adoption_request: dict) -> dict:
    """Shape an adoption request row for the JSON API."""
    return {
        "id": adoption_request["id"],
        "adopterName": adoption_request["adopter_name"],
        "email": adoption_request["email"],
        "notes": adoption_request["notes"]
    }


def serialize_animal(animal: dict) -> dict:
    """Shape an animal row with nested requests for the JSON API."""
    return {
        "id": animal["id"],
        "name": animal["name"],
        "avatarUrl": animal["avatar_url"],
        "description": animal["description"],
        "rescueDate": animal["rescue_date"],
        "adoptionRequests": [
            serialize_adoption_request(r) for r in animal["adoption_requests"]
        ]
    }


@router.get("/animals")
def list_animals():
    """List all animals with their adoption requests."""
    db = create_connection()
    try:
        service = get_adoption_service(db)
        return [serialize_animal(a) for a in service.list_animals()]
    finally:
        db.close()


@router.get("/animals/{animal_id}")
def get_animal(animal_id: int):
    """Get a single animal with its adoption requests."""
    db = create_connection()
    try:
        service = get_adoption_service(db)
        return serialize_animal(service.get_animal(animal_id))
    finally:
        db.close()


@router.post("/animals/{animal_id}/adoption-requests", status_code=201)
def submit_adoption_request(
    animal_id: int,
    data: AdoptionRequestInput,
    response: Response,
    user: dict = Depends(require_adopter)
):
    """Submit an adoption request as the current user."""
    db = create_connection()
    try:
        service = get_adoption_service(db)
        request_id = service.submit_request(
            animal_id=animal_id,
            principal=user["username"],
            email=data.email,
            notes=data.notes
        )
    finally:
        db.close()

    response.headers["Location"] = f"/animals/{animal_id}/adoption-requests/{request_id}"
    return {"id": request_id}


@router.put("/animals/{animal_id}/adoption-requests/{request_id}")
def edit_adoption_request(
    animal_id: int,
    request_id: int,
    data: AdoptionRequestInput,
    user: dict = Depends(require_adopter)
):
    """Edit email and notes of the current user's adoption request."""
    db = create_connection()
    try:
        service = get_adoption_service(db)
        updated = service.edit_request(
            animal_id=animal_id,
            request_id=request_id,
            principal=user["username"],
            email=data.email,
            notes=data.notes
        )
        return serialize_adoption_request(updated)
    finally:
        db.close()


@router.delete("/animals/{animal_id}/adoption-requests/{request_id}")
def delete_adoption_request(
    animal_id: int,
    request_id: int,
    user: dict = Depends(require_adopter)
):
    """Withdraw the current user's adoption request."""
    db = create_connection()
    try:
        service = get_adoption_service(db)
        service.delete_request(
            animal_id=animal_id,
            request_id=request_id,
            principal=user["username"]
        )
        return {"status": "ok"}
    finally:
        db.close()


@router.get("/whoami")
def whoami(request: Request):
    """Return the principal forwarded by the gateway."""
    user = require_user(request)
    return {
        "username": user["username"],
        "authorities": sorted(user["authorities"])
    }
