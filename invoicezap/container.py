import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Registration:
    factory: Callable[[], Any]
    singleton: bool = False


@dataclass
class Container:
    """Minimal service locator keyed by interface type."""
    _registrations: dict[type, Registration] = field(default_factory=dict)
    _instances: dict[type, Any] = field(default_factory=dict)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Re-registering drops a cached instance of the same interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._registrations[interface] = Registration(factory, singleton)
        self._instances.pop(interface, None)

    def is_registered(self, interface: type) -> bool:
        return interface in self._registrations

    def resolve(self, interface: type[T]) -> T:
        if interface in self._instances:
            return self._instances[interface]

        registration = self._registrations.get(interface)
        if registration is None:
            raise KeyError(f"No factory registered for {interface}")

        instance = registration.factory()
        if registration.singleton:
            self._instances[interface] = instance
        return instance

    def reset(self) -> None:
        """Drop cached singletons (for testing)."""
        self._instances.clear()


container = Container()


def configure_container(settings: Settings) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.

    Returns:
        Configured container.
    """
    from .core.protocols.id_generator import IdGeneratorProtocol
    from .core.services.onboarding_service import OnboardingService
    from .core.services.recommender import TemplateRecommender
    from .core.services.template_registry import TemplateRegistry
    from .infrastructure.ids.timestamp_ids import TimestampIdGenerator

    container.register(
        IdGeneratorProtocol,
        lambda: TimestampIdGenerator(suffix_length=settings.id_suffix_length),
        singleton=True,
    )

    container.register(
        TemplateRegistry,
        lambda: TemplateRegistry(id_generator=container.resolve(IdGeneratorProtocol)),
        singleton=True,
    )

    container.register(
        TemplateRecommender,
        lambda: TemplateRecommender(
            config_path=settings.scoring_config_path,
            default_limit=settings.recommendation_limit,
        ),
        singleton=True,
    )

    container.register(
        OnboardingService,
        lambda: OnboardingService(
            recommender=container.resolve(TemplateRecommender),
            registry=container.resolve(TemplateRegistry),
        ),
        singleton=True,
    )

    logger.info("Container configured")
    return container
