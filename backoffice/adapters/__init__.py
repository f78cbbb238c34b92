"""Weather provider adapters."""
# Auto-register providers
from backoffice.adapters.open_meteo_adapter import OpenMeteoAdapter
from backoffice.adapters.mock_adapter import MockAdapter
