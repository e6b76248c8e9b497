"""Rule-based matching of community collaborators to organizing projects."""

from collab_match.utils.constants import APP_DISPLAY_NAME as __app_name__
from collab_match.utils.constants import VERSION as __version__

__all__ = ["__app_name__", "__version__"]
