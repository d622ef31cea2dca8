"""
PropMatch: client and property inventory matcher for real-estate agents.
"""

from propmatch.utils.constants import APP_NAME, VERSION

__app_name__ = APP_NAME
__version__ = VERSION
