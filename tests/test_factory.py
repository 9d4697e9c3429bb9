from localnews.config import Config, ConfigModel
from localnews.location import ConfiguredLocationProvider
from localnews.network import ConnectivityChecker
from localnews.pipeline import NewsOrchestrator, build_orchestrator


def test_build_orchestrator_from_config(fake_pool, monkeypatch):
    monkeypatch.setenv("LOCALNEWS_GEOAPIFY_KEY", "geo")
    monkeypatch.setenv("LOCALNEWS_NEWSAPI_KEY", "news")
    config = Config.from_model(
        ConfigModel(
            location={"latitude": 12.97, "longitude": 77.59, "permission_granted": True, "timeout": 5},
            news={"connect_timeout": 4, "read_timeout": 6},
            fetch={"offline_fallback": False},
        )
    )

    orchestrator = build_orchestrator(config, fake_pool)

    assert isinstance(orchestrator, NewsOrchestrator)
    assert isinstance(orchestrator.location_resolver.provider, ConfiguredLocationProvider)
    assert orchestrator.location_resolver.timeout == 5
    assert orchestrator.geocode_client.api_key == "geo"
    assert orchestrator.news_client.api_key == "news"
    assert orchestrator.news_client.timeout.connect == 4
    assert orchestrator.news_client.timeout.read == 6
    assert orchestrator.store.pool is fake_pool
    assert orchestrator.offline_fallback is False


def test_build_orchestrator_uses_connectivity_override(fake_pool):
    def offline():
        return False

    config = Config.from_model(ConfigModel(network={"probe_reachability": True}))

    forced = build_orchestrator(config, fake_pool, is_connected=offline)
    default = build_orchestrator(config, fake_pool)

    assert forced.is_connected is offline
    assert isinstance(default.is_connected, ConnectivityChecker)
    assert default.is_connected.probe_reachability is True
