"""
3scale application management client.

Every operation is a single synchronous round-trip against the admin portal:
build the path, attach the access token, send through the injected
``httpx.Client`` and decode the body with the codec the endpoint speaks.
"""

from typing import List, Optional, Tuple, Type, TypeVar, Union
from urllib.parse import urlencode
import logging

import httpx
from pydantic import BaseModel

from porta_client import USER_AGENT
from porta_client.config.settings import PortaClientSettings, get_settings

from . import endpoints
from .admin_portal import AdminPortal
from .codecs import JSON_CODEC, XML_CODEC, ResponseCodec
from .errors import ApiError, ConfigurationError, DecodeError, TransportError
from .models import (
    Application,
    ApplicationElem,
    ApplicationList,
    ApplicationPlan,
    ApplicationPlanItem,
    Params,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# Account and application IDs are numeric, but callers often hold them as strings
ID = Union[int, str]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ThreeScaleClient:
    """
    Client for the application endpoints of a 3scale admin portal.

    The client only holds immutable configuration, so one instance can be
    shared by several callers as long as the transport allows it (the
    default ``httpx.Client`` does). Timeouts belong to the transport.
    """

    def __init__(
        self,
        admin_portal: AdminPortal,
        credential: str,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
        verify_ssl: bool = True,
    ):
        self._admin_portal = admin_portal
        self._credential = credential
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            verify=verify_ssl,
        )

    @property
    def admin_portal(self) -> AdminPortal:
        """Portal every request is sent to."""
        return self._admin_portal

    # Lifecycle

    def close(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "ThreeScaleClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Applications

    def create_application(
        self,
        account_id: ID,
        plan_id: ID,
        name: str,
        description: str = "",
    ) -> Application:
        """Create an application for an account on the given plan."""
        path = endpoints.build_path(endpoints.APP_CREATE, account_id=account_id)
        form = [
            ("account_id", str(account_id)),
            ("plan_id", str(plan_id)),
            ("name", name),
            ("description", description),
        ]
        response = self._request("POST", path, XML_CODEC, form=form)
        return self._decode(response, XML_CODEC, ApplicationElem).application

    def list_applications(self, account_id: ID) -> ApplicationList:
        """List the applications of one account."""
        path = endpoints.build_path(endpoints.APP_LIST, account_id=account_id)
        response = self._request("GET", path, JSON_CODEC)
        return self._decode(response, JSON_CODEC, ApplicationList)

    def list_all_applications(self) -> ApplicationList:
        """List the applications of every account."""
        response = self._request("GET", endpoints.APP_LIST_ALL, JSON_CODEC)
        return self._decode(response, JSON_CODEC, ApplicationList)

    def read_application(self, account_id: ID, application_id: ID) -> Application:
        """Fetch a single application. A missing one raises ApiError with code 404."""
        path = endpoints.build_path(endpoints.APP_READ, account_id=account_id, application_id=application_id)
        response = self._request("GET", path, JSON_CODEC)
        return self._decode(response, JSON_CODEC, ApplicationElem).application

    def update_application(self, account_id: ID, application_id: ID, params: Params) -> Application:
        """
        Update the given fields of an application.

        Only the fields present in ``params`` change. Entries are sent
        exactly as given, including an empty key, and an empty mapping still
        issues the request.
        """
        path = endpoints.build_path(endpoints.APP_UPDATE, account_id=account_id, application_id=application_id)
        response = self._request("PUT", path, JSON_CODEC, form=list(params.items()))
        return self._decode(response, JSON_CODEC, ApplicationElem).application

    def delete_application(self, account_id: ID, application_id: ID) -> None:
        """Delete an application."""
        path = endpoints.build_path(endpoints.APP_DELETE, account_id=account_id, application_id=application_id)
        self._request("DELETE", path, JSON_CODEC)

    def change_application_plan(self, account_id: ID, application_id: ID, plan_id: ID) -> Application:
        """Move an application to another plan."""
        path = endpoints.build_path(endpoints.APP_CHANGE_PLAN, account_id=account_id, application_id=application_id)
        response = self._request("PUT", path, JSON_CODEC, form=[("plan_id", str(plan_id))])
        return self._decode(response, JSON_CODEC, ApplicationElem).application

    def create_application_custom_plan(self, account_id: ID, application_id: ID) -> ApplicationPlanItem:
        """Clone the application's current plan into a plan of its own."""
        path = endpoints.build_path(endpoints.APP_CUSTOMIZE_PLAN, account_id=account_id, application_id=application_id)
        response = self._request("PUT", path, JSON_CODEC, form=[])
        return self._decode(response, JSON_CODEC, ApplicationPlan).element

    def delete_application_custom_plan(self, account_id: ID, application_id: ID) -> None:
        """Drop the application's custom plan and return it to the shared one."""
        path = endpoints.build_path(endpoints.APP_DECUSTOMIZE_PLAN, account_id=account_id, application_id=application_id)
        self._request("PUT", path, JSON_CODEC, form=[])

    def suspend_application(self, account_id: ID, application_id: ID) -> Application:
        """Suspend an application. The server sets its state to "suspended"."""
        path = endpoints.build_path(endpoints.APP_SUSPEND, account_id=account_id, application_id=application_id)
        response = self._request("PUT", path, JSON_CODEC, form=[])
        return self._decode(response, JSON_CODEC, ApplicationElem).application

    def resume_application(self, account_id: ID, application_id: ID) -> Application:
        """Resume a suspended application. The server sets its state to "live"."""
        path = endpoints.build_path(endpoints.APP_RESUME, account_id=account_id, application_id=application_id)
        response = self._request("PUT", path, JSON_CODEC, form=[])
        return self._decode(response, JSON_CODEC, ApplicationElem).application

    # Internals

    def _request(
        self,
        method: str,
        path: str,
        codec: ResponseCodec,
        form: Optional[List[Tuple[str, str]]] = None,
    ) -> httpx.Response:
        """Send one request and raise for transport failures and non-2xx statuses."""
        url = self._admin_portal.url_for(path)
        headers = {
            "Accept": codec.media_type,
            "User-Agent": USER_AGENT,
        }
        params = None
        content = None

        if form is None:
            params = {"access_token": self._credential}
        else:
            headers["Content-Type"] = FORM_CONTENT_TYPE
            content = urlencode(form + [("access_token", self._credential)])

        logger.debug(f"{method} {path}")

        try:
            response = self._http_client.request(
                method,
                url,
                params=params,
                content=content,
                headers=headers,
            )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Transport error on {method} {path}: {e}")
            raise TransportError(
                f"Error sending {method} {path}: {e}",
                url=url,
                original_error=e
            ) from e

        if not response.is_success:
            error = ApiError(response.status_code, response.text)
            logger.warning(f"{method} {path} failed with status {error.code}: {error.reason}")
            raise error

        return response

    def _decode(self, response: httpx.Response, codec: ResponseCodec, model: Type[M]) -> M:
        try:
            return codec.decode(response.content, model)
        except DecodeError as e:
            logger.error(f"Error decoding response from {response.request.url.path}: {e}")
            raise


def create_client(
    settings: Optional[PortaClientSettings] = None,
    http_client: Optional[httpx.Client] = None,
) -> ThreeScaleClient:
    """
    Create a client from settings.

    Args:
        settings: Settings to use; loaded from the environment when omitted
        http_client: Transport to inject instead of a client-owned one

    Returns:
        Configured ThreeScaleClient

    Raises:
        ConfigurationError: If the admin portal URL or the access token is missing
    """
    settings = settings or get_settings()

    if not settings.admin_portal_url:
        raise ConfigurationError(
            "Admin portal URL is not configured. Set THREESCALE_ADMIN_PORTAL_URL.",
            config_field="admin_portal_url"
        )
    if not settings.access_token:
        raise ConfigurationError(
            "Access token is not configured. Set THREESCALE_ACCESS_TOKEN.",
            config_field="access_token"
        )

    return ThreeScaleClient(
        AdminPortal.from_url(settings.admin_portal_url),
        settings.access_token,
        http_client=http_client,
        timeout=settings.timeout,
        verify_ssl=settings.verify_ssl,
    )
