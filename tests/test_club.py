import httpx
import pytest
import respx

from vibing.club import ClubResponse, get_club_info
from vibing.creds import CredentialStore
from vibing.errors import AuthorizationError, CredentialsNotFoundError, FetchError

BACKEND = "http://backend.example.com"

CLUB_DOC = {
    "createdBy": "admin",
    "modifiedBy": "admin",
    "deleted": False,
    "id": 7,
    "clubName": "Night Owl",
    "vatCode": "VAT-0000",
    "address": "1 Example Street",
    "category": "techno",
    "openingTime": "22:00",
    "closingTime": "05:00",
    "phoneNumber": "000",
    "image": None,
}


@pytest.fixture
def backend_env(monkeypatch, tmp_path):
    path = tmp_path / "creds.json"
    monkeypatch.setenv("BACKEND_URL", BACKEND)
    monkeypatch.setenv("CREDENTIAL_STORE_PATH", str(path))
    monkeypatch.setenv("CREDENTIAL_STORE_AUTH_SERVICE", "vibing")
    monkeypatch.setenv("CREDENTIAL_STORE_AUTH_USER", "me")
    return CredentialStore(path)


def test_from_dict_maps_camel_case():
    club = ClubResponse.from_dict(CLUB_DOC)
    assert club.club_name == "Night Owl"
    assert club.vat_code == "VAT-0000"
    assert club.opening_time == "22:00"
    assert club.id == 7
    assert club.image is None


def test_from_dict_image_optional_and_present():
    doc = {k: v for k, v in CLUB_DOC.items() if k != "image"}
    assert ClubResponse.from_dict(doc).image is None
    assert ClubResponse.from_dict({**CLUB_DOC, "image": "pic.png"}).image == "pic.png"


def test_from_dict_missing_field():
    doc = {k: v for k, v in CLUB_DOC.items() if k != "clubName"}
    with pytest.raises(ValueError):
        ClubResponse.from_dict(doc)


def test_from_dict_rejects_negative_id():
    with pytest.raises(ValueError):
        ClubResponse.from_dict({**CLUB_DOC, "id": -1})


def test_get_club_info(backend_env, capsys):
    backend_env.set_password("vibing", "me", "token")
    with respx.mock() as router:
        route = router.get(f"{BACKEND}/api/v1/club/7").mock(
            return_value=httpx.Response(200, json=CLUB_DOC)
        )
        club = get_club_info(7)
    assert club == ClubResponse.from_dict(CLUB_DOC)
    assert route.calls.last.request.headers["authorization"] == "Bearer token"
    assert "Night Owl" in capsys.readouterr().out


def test_get_club_info_unauthorized(backend_env):
    backend_env.set_password("vibing", "me", "token")
    with respx.mock() as router:
        router.get(f"{BACKEND}/api/v1/club/7").mock(return_value=httpx.Response(401))
        with pytest.raises(AuthorizationError):
            get_club_info(7)


def test_get_club_info_bad_document(backend_env):
    backend_env.set_password("vibing", "me", "token")
    with respx.mock() as router:
        router.get(f"{BACKEND}/api/v1/club/7").mock(
            return_value=httpx.Response(200, json={"id": 7})
        )
        with pytest.raises(FetchError):
            get_club_info(7)


def test_get_club_info_without_credentials(backend_env):
    with pytest.raises(CredentialsNotFoundError):
        get_club_info(7)