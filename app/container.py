"""Dependency Injection container - initialized at app startup."""

from app.repositories.dataset import DatasetLoader
from app.services.dashboard.service import DashboardService
from app.services.metrics.service import MetricsService
from settings import DATA_SOURCE


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, source: str = DATA_SOURCE) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self.loader = DatasetLoader(source)

        # Services
        self.metrics = MetricsService()
        self.dashboard = DashboardService(metrics=self.metrics)

        self._initialized = True


# Global container instance
container = Container()
