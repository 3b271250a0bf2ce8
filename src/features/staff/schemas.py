"""Staff form schemas (DTOs)."""

from pydantic import BaseModel


class StaffFormRequest(BaseModel):
    """Staff create/edit form as submitted by the admin UI.

    Every field is optional here; presence and format are checked by the
    staff form schema so all field errors are reported together.
    """

    name: str | None = None
    mobile_no: str | None = None
    email: str | None = None
    id_no: str | None = None
    date_of_birth: str | None = None
    nic_no: str | None = None
    department: str | None = None
    specialization: str | None = None
    image_url: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    is_active: bool = True
