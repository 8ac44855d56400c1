from .config import Settings as Settings, get_settings as get_settings
from .clients import AdminClient as AdminClient, ViewerClient as ViewerClient
from .schemas import DEFAULT_FLAG_KEY as DEFAULT_FLAG_KEY, FlagsResponse as FlagsResponse
from .services import FlagClient as FlagClient, FlagPoller as FlagPoller
from .services.transport import HTTPTransport as HTTPTransport, AioHTTPTransport as AioHTTPTransport

__version__ = "0.1.0"
