from .admin import AdminClient as AdminClient
from .viewer import ViewerClient as ViewerClient
