# Import every model so Base.metadata and mapper relationships are complete
from transfer_admin.models.base import Base  # noqa: F401
from transfer_admin.models import user, vehicle, driver, reservation, passenger, accounting_record  # noqa: F401
