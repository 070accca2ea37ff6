"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from avatarforge.config import Settings, settings
from avatarforge.engine.config import RenderConfig
from avatarforge.engine.renderer import MultiResolutionRenderer
from avatarforge.services.avatars import AvatarService, create_avatar_service
from avatarforge.storage.factory import create_storage


def get_settings() -> Settings:
    return settings


def build_avatar_service(config: Settings) -> AvatarService:
    renderer = MultiResolutionRenderer(
        config=RenderConfig(
            workers=config.render_workers,
            timeout_s=config.render_timeout_s,
            reproducible_seeds=config.reproducible_seeds,
        )
    )
    return create_avatar_service(
        storage=create_storage(config.storage_driver, config.storage_path),
        metadata_path=config.metadata_path,
        renderer=renderer,
        default_size_exponent=config.default_size_exponent,
    )


@lru_cache(maxsize=1)
def get_avatar_service() -> AvatarService:
    return build_avatar_service(settings)
