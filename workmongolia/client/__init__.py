"""Admin client: request layer, query cache and screen controllers"""

from workmongolia.client.api_client import ApiClient
from workmongolia.client.query_cache import QueryCache
from workmongolia.client.notifications import Notifier, Notification
from workmongolia.client.forms import FormState
from workmongolia.client.screen import CrudPanel, RecruitmentMasterScreen

__all__ = [
    "ApiClient",
    "QueryCache",
    "Notifier",
    "Notification",
    "FormState",
    "CrudPanel",
    "RecruitmentMasterScreen",
]
