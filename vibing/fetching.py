"""HTTP requests to the backend and identity server."""

import dataclasses
import enum
from dataclasses import dataclass

import httpx

from vibing.creds import get_cred_use_defaults
from vibing.env import get_env
from vibing.errors import AuthorizationError, FetchError, NetworkError, from_http_error
from vibing.utils import verbose_print


@dataclass
class FetchOptions:
    """Everything needed to send one request."""

    host: str
    path: str
    method: str
    headers: dict | None = None
    authorization: str | None = None
    data: object = None


class PageDirection(enum.Enum):
    """Sort direction of a paged listing."""

    DESC = "Desc"
    ASC = "Asc"


@dataclass
class PageOptions:
    """Paging parameters of a listing request."""

    page: int = 0
    size: int = 5
    sort: str | None = None
    direction: PageDirection | None = None
    show_total_count: bool = False

    def to_dict(self):
        """Return the parameters with camel-case names."""
        return {
            "page": self.page,
            "size": self.size,
            "sort": self.sort,
            "direction": self.direction.value if self.direction is not None else None,
            "showTotalCount": self.show_total_count,
        }


def _serialize(data):
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if hasattr(data, "to_form"):
        return data.to_form()
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return dataclasses.asdict(data)
    return data


def _request_body(options):
    """Pick the body encoding from the ``Content-type`` header, JSON by default."""
    if options.headers is None:
        options.headers = {"Content-type": "application/json"}
    payload = _serialize(options.data)
    content_type = httpx.Headers(options.headers).get("Content-type")
    if content_type is None or "json" in content_type:
        return {"json": payload}
    if "form-data" in content_type:
        return {"data": payload}
    return {}


def fetch(options, verbose=False):
    """Send the request described by ``options`` and return the decoded JSON body."""
    verbose_print(verbose, "Building request...")
    url = f"{options.host.strip()}{options.path.strip()}"
    headers = httpx.Headers()
    if options.authorization is not None:
        headers["Authorization"] = f"Bearer {options.authorization}"
    body = _request_body(options) if options.data is not None else {}
    if options.headers is not None:
        headers.update(options.headers)

    verbose_print(verbose, "Fetching data...")
    try:
        with httpx.Client() as client:
            response = client.request(
                str(options.method).upper(), url, headers=headers, **body
            )
    except httpx.HTTPError as err:
        raise from_http_error(err) from err

    print(f"{response.status_code} {response.reason_phrase}")
    verbose_print(verbose, "Done.\nDeserializing response...")
    if response.is_success:
        if not response.content.strip():
            result = None
        else:
            try:
                result = response.json()
            except ValueError as err:
                raise FetchError("Could not decode the response body", cause=err) from err
        verbose_print(verbose, "Done.")
        return result
    if response.status_code == 401:
        raise AuthorizationError()
    raise NetworkError()


def fetch_backend(path, method, data=None, verbose=False):
    """Send an authenticated request to the configured backend."""
    options = FetchOptions(
        host=get_env("BACKEND_URL"),
        path=path,
        method=method,
        headers=None,
        authorization=get_cred_use_defaults(),
        data=data,
    )
    return fetch(options, verbose)