"""Path templates of the application management endpoints."""

from typing import Final, Union
from urllib.parse import quote

APP_CREATE: Final[str] = "/admin/api/accounts/{account_id}/applications.json"
APP_LIST: Final[str] = "/admin/api/accounts/{account_id}/applications.json"
APP_LIST_ALL: Final[str] = "/admin/api/accounts/applications.json"
APP_READ: Final[str] = "/admin/api/accounts/{account_id}/applications/{application_id}.json"
APP_UPDATE: Final[str] = "/admin/api/accounts/{account_id}/applications/{application_id}.json"
APP_DELETE: Final[str] = "/admin/api/accounts/{account_id}/applications/{application_id}.json"
APP_CHANGE_PLAN: Final[str] = "/admin/api/accounts/{account_id}/applications/{application_id}/change_plan.json"
APP_CUSTOMIZE_PLAN: Final[str] = "/admin/api/accounts/{account_id}/applications/{application_id}/customize_plan.json"
APP_DECUSTOMIZE_PLAN: Final[str] = "/admin/api/accounts/{account_id}/applications/{application_id}/decustomize_plan.json"
APP_SUSPEND: Final[str] = "/admin/api/accounts/{account_id}/applications/{application_id}/suspend.json"
APP_RESUME: Final[str] = "/admin/api/accounts/{account_id}/applications/{application_id}/resume.json"


def build_path(template: str, **ids: Union[int, str]) -> str:
    """Fill a path template, escaping each ID as a single path segment."""
    return template.format(**{name: quote(str(value), safe="") for name, value in ids.items()})
