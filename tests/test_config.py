from utils import config


def test_service_level_out_of_range_falls_back(monkeypatch):
	for bad in ("0", "1", "1.2", "-0.5", "abc"):
		monkeypatch.setenv("DEFAULT_SERVICE_LEVEL", bad)
		assert config._get_service_level("DEFAULT_SERVICE_LEVEL", 0.95) == 0.95


def test_service_level_in_range_is_used(monkeypatch):
	monkeypatch.setenv("DEFAULT_SERVICE_LEVEL", "0.9")
	assert config._get_service_level("DEFAULT_SERVICE_LEVEL", 0.95) == 0.9
