"""
Contact endpoints.

These routes map HTTP requests to ``ContactService`` calls.  Bodies
are accepted as JSON or XML and responses are rendered in the format
requested by the client (see ``api.negotiation``).  Service errors
are translated to status codes by the exception handlers registered
in ``main.py``:

* ``BadResourceException`` → 400
* ``ResourceNotFoundException`` → 404
* ``ResourceAlreadyExistsException`` → 409
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from contact_directory_api.app.api.deps import get_contact_service
from contact_directory_api.app.api.negotiation import dump, parse_model, read_body, render
from contact_directory_api.app.schemas.contact import Address, Contact
from contact_directory_api.app.services.contact_service import ContactService


router = APIRouter()

_BODY_CONTENT = {
    "application/json": {"schema": Contact.model_json_schema(by_alias=True)},
    "application/xml": {"schema": Contact.model_json_schema(by_alias=True)},
}
_ADDRESS_CONTENT = {
    "application/json": {"schema": Address.model_json_schema(by_alias=True)},
    "application/xml": {"schema": Address.model_json_schema(by_alias=True)},
}


@router.get("", response_model=List[Contact], name="list_contacts")
async def list_contacts(
    request: Request,
    page: int = Query(1, description="Page number, default is 1"),
    name: Optional[str] = Query(None, description="Name of the contact for search."),
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Find contacts, optionally by name.

    The name search matches any contact whose name contains ``name``
    (case-insensitive).  Results are paginated by the configured page
    size.
    """
    if not name:
        contacts = service.list_all(page)
    else:
        contacts = service.list_by_name(name, page)
    return render(request, dump(contacts))


@router.get(
    "/{contact_id}",
    response_model=Contact,
    name="get_contact",
    responses={404: {"description": "Contact not found"}},
)
async def get_contact(
    contact_id: int,
    request: Request,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Return a single contact."""
    return render(request, dump(service.find_by_id(contact_id)))


@router.post(
    "",
    response_model=Contact,
    status_code=status.HTTP_201_CREATED,
    name="add_contact",
    responses={400: {"description": "Invalid input"}, 409: {"description": "Contact already exists"}},
    openapi_extra={"requestBody": {"required": True, "content": _BODY_CONTENT}},
)
async def add_contact(
    request: Request,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Add a new contact.

    Responds with 201 and a ``Location`` header pointing at the new
    contact.
    """
    contact = parse_model(Contact, await read_body(request))
    created = service.create(contact)
    location = request.app.url_path_for("get_contact", contact_id=created.id)
    return render(
        request,
        dump(created),
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.put(
    "/{contact_id}",
    name="update_contact",
    responses={400: {"description": "Invalid input"}, 404: {"description": "Contact not found"}},
    openapi_extra={"requestBody": {"required": True, "content": _BODY_CONTENT}},
)
async def update_contact(
    contact_id: int,
    request: Request,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Replace an existing contact.  The id in the path wins over any id in the body."""
    contact = parse_model(Contact, await read_body(request))
    contact.id = contact_id
    service.update(contact)
    return Response(status_code=status.HTTP_200_OK)


@router.patch(
    "/{contact_id}",
    name="update_address",
    responses={404: {"description": "Contact not found"}},
    openapi_extra={"requestBody": {"required": True, "content": _ADDRESS_CONTENT}},
)
async def update_address(
    contact_id: int,
    request: Request,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Update only the address of an existing contact."""
    address = parse_model(Address, await read_body(request))
    service.update_address(contact_id, address)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{contact_id}",
    name="delete_contact",
    responses={404: {"description": "Contact not found"}},
)
async def delete_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> Response:
    """Delete a contact."""
    service.delete_by_id(contact_id)
    return Response(status_code=status.HTTP_200_OK)
