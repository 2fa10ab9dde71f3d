"""
Test utility functions, token helpers, storage and trend reshaping.
"""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest

from healthwallet.core.security import (
    JWTError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from healthwallet.models import VitalType
from healthwallet.services import StorageService, build_trends
from healthwallet.services.report_service import parse_report_date, parse_vital_tags
from healthwallet.core.exceptions import ReportValidationError
from healthwallet.utils.file_utils import (
    clean_original_filename,
    file_url_for,
    format_file_size,
    generate_unique_filename,
    get_file_extension,
    is_allowed_file,
    user_relative_path,
)


def test_generate_unique_filename():
    """Test unique filename generation."""
    filename1 = generate_unique_filename("test.pdf")
    filename2 = generate_unique_filename("test.pdf")
    assert filename1 != filename2
    assert filename1.endswith(".pdf")
    assert generate_unique_filename("scan.JPEG").endswith(".jpeg")


def test_get_file_extension():
    assert get_file_extension("Test.PDF") == ".pdf"
    assert get_file_extension("archive.tar.gz") == ".gz"
    assert get_file_extension("README") == ""


def test_clean_original_filename():
    assert clean_original_filename("C:\\Users\\me\\lab.pdf") == "lab.pdf"
    assert clean_original_filename("../../etc/passwd") == "passwd"
    assert clean_original_filename("report.pdf") == "report.pdf"


def test_is_allowed_file():
    """Test file extension validation."""
    allowed = {".pdf", ".jpg", ".png"}
    assert is_allowed_file("test.pdf", allowed) is True
    assert is_allowed_file("photo.PNG", allowed) is True
    assert is_allowed_file("test.txt", allowed) is False
    assert is_allowed_file("pdf", allowed) is False


def test_file_urls():
    assert user_relative_path(7, "abc.pdf") == "7/abc.pdf"
    assert file_url_for("7/abc.pdf") == "/uploads/7/abc.pdf"


def test_format_file_size():
    assert format_file_size(500) == "500.00 B"
    assert format_file_size(1048576) == "1.00 MB"


def test_password_hashing():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("Secret123", hashed)


def test_access_token_round_trip(settings):
    token = create_access_token(42, "a@example.com", settings)
    assert decode_access_token(token, settings) == 42


def test_expired_access_token(settings):
    token = create_access_token(1, "a@example.com", settings, expires_delta=timedelta(minutes=-1))
    with pytest.raises(JWTError):
        decode_access_token(token, settings)


def test_access_token_from_other_secret(settings):
    token = create_access_token(1, "a@example.com", settings)
    other = settings.model_copy(update={"jwt_secret_key": "other-secret"})
    with pytest.raises(JWTError):
        decode_access_token(token, other)


def test_parse_report_date():
    assert parse_report_date(" 2024-01-15 ").isoformat() == "2024-01-15"
    with pytest.raises(ReportValidationError):
        parse_report_date("2024-13-01")


def test_parse_vital_tags_deduplicates():
    assert parse_vital_tags(["BP", "", "Sugar", "BP"]) == [VitalType.BP, VitalType.SUGAR]
    assert parse_vital_tags(None) == []
    with pytest.raises(ReportValidationError):
        parse_vital_tags(["Pulse"])


def test_build_trends():
    t0 = datetime(2024, 1, 1, 9, 0)
    vitals = [
        SimpleNamespace(vital_type=VitalType.BP, value=120.0, recorded_at=t0),
        SimpleNamespace(vital_type="Sugar", value=95.0, recorded_at=t0 + timedelta(hours=1)),
        SimpleNamespace(vital_type=VitalType.BP, value=125.0, recorded_at=t0 + timedelta(days=1)),
    ]
    assert build_trends(vitals) == {
        "BP": [
            {"value": 120.0, "date": t0},
            {"value": 125.0, "date": t0 + timedelta(days=1)},
        ],
        "Sugar": [{"value": 95.0, "date": t0 + timedelta(hours=1)}],
    }
    assert build_trends([]) == {}


def test_storage_save_and_delete(settings):
    storage = StorageService(settings)
    stored = storage.save_file(b"data", "scan.png", user_id=3)

    assert stored["file_path"].startswith("3/")
    assert stored["url"] == f"/uploads/{stored['file_path']}"
    assert stored["size"] == 4
    assert storage.exists(stored["file_path"])

    assert storage.delete_file(stored["file_path"]) is True
    assert not storage.exists(stored["file_path"])
    assert storage.delete_file(stored["file_path"]) is False


def test_storage_rejects_escaping_paths(settings):
    storage = StorageService(settings)
    with pytest.raises(ValueError):
        storage.resolve("../outside.pdf")
