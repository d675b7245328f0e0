"""Service layer modules."""

from .exchange import compose_exchange, select_base_currency
from .info import compose_country_info
from .status import ServiceClock, ServiceHealth, init_service_clock, probe_status
