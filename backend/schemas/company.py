from typing import Optional
from schemas.common import CamelModel


# Company letterhead shown on printed offers
class CompanySettingsBase(CamelModel):
    company_name: Optional[str] = None
    contact_name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None
    logo_url: Optional[str] = None


class CompanySettingsUpdate(CompanySettingsBase):
    pass


class CompanySettingsOut(CompanySettingsBase):
    pass
