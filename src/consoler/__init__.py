"""consoler — verbosity-gated logging facade.

Categorized messages that stay silent until an operator unlocks the
matching verbose mode. The selection persists across restarts.
"""

from consoler._version import __version__, __app_name__
from consoler.lib.log_lib import Consoler, Tag, TagColorError, verbose

__all__ = ["__version__", "__app_name__", "Consoler", "Tag", "TagColorError", "verbose"]
