"""Student form schemas (DTOs)."""

from pydantic import BaseModel


class StudentFormRequest(BaseModel):
    """Student create/edit form as submitted by the admin UI."""

    name: str | None = None
    email: str | None = None
    mobile_no: str | None = None
    id_no: str | None = None
    date_of_birth: str | None = None
    nic_no: str | None = None
    image_url: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    is_active: bool = True
