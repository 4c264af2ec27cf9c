import pytest

import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PETFINDER_API_KEY", "PETFINDER_SECRET_KEY", "PETFINDER_BASE_URL",
                 "PETFINDER_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(main, "load_dotenv", lambda: None)


def test_rejected_credentials_exit_with_status_1(petfinder_api, caplog):
    api = petfinder_api(auth_status=401)

    with pytest.raises(SystemExit) as exc_info:
        main.main(["--apiKey", "key", "--secretKey", "wrong"], transport=api.transport)

    assert exc_info.value.code == 1
    assert api.paths() == ["/v2/oauth2/token"]
    assert "Startup failed" in caplog.text


def test_missing_credentials_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main.main([])
    assert exc_info.value.code == 2
