"""Avatar service: render, encode and store on write; load and filter on read."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from avatarforge.engine.context import GenerationParams
from avatarforge.engine.errors import AvatarNotFound, ValidationError
from avatarforge.engine.filters import FilterKind, apply_filter
from avatarforge.engine.registry import GeneratorType
from avatarforge.engine.renderer import MultiResolutionRenderer
from avatarforge.engine.schemes import ColorScheme
from avatarforge.engine.validation import size_for_exponent
from avatarforge.storage.base import StorageStrategy
from avatarforge.storage.metadata import AvatarRecord, MetadataStore
from avatarforge.utils.codec import decode_png, encode_png

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


@dataclass
class GeneratedAvatar:
    id: str
    created_at: datetime
    type: str
    # Edge size → PNG bytes
    images: dict[int, bytes] = field(default_factory=dict)


@dataclass
class AvatarPage:
    avatars: list[AvatarRecord]
    total: int
    offset: int
    pick: int

    @property
    def has_more(self) -> bool:
        return self.offset + self.pick < self.total


def apply_filter_png(image: bytes, kind: FilterKind | str | None) -> bytes:
    """Filter an encoded image. None or an unknown kind returns ``image`` untouched."""
    parsed = FilterKind.parse(kind)
    if parsed is None:
        return image
    return encode_png(apply_filter(decode_png(image), parsed))


class AvatarService:
    def __init__(
        self,
        storage: StorageStrategy,
        metadata: MetadataStore,
        renderer: MultiResolutionRenderer | None = None,
        default_size_exponent: int = 6,
    ) -> None:
        self.storage = storage
        self.metadata = metadata
        self.renderer = renderer or MultiResolutionRenderer()
        self.default_size_exponent = default_size_exponent

    def generate(
        self,
        params: GenerationParams,
        cancel: threading.Event | None = None,
    ) -> GeneratedAvatar:
        logger.info("Generating new %s avatar", params.type)

        rasters = self.renderer.render(params, cancel=cancel)
        images = {size: encode_png(rasters[size]) for size in rasters}

        avatar_id = str(uuid.uuid4())
        created_at = datetime.now(timezone.utc)
        generator_type = GeneratorType.parse(params.type).value

        location = self.storage.save(avatar_id, images)
        record = AvatarRecord(
            id=avatar_id,
            created_at=created_at,
            type=generator_type,
            primary_color=params.primary_color,
            foreign_color=params.foreign_color,
            color_scheme=params.color_scheme,
            seed=params.seed,
            angle=params.angle,
            location=location,
        )
        try:
            self.metadata.add(record)
        except Exception:
            # No record points at the images; drop them before re-raising
            self.storage.delete(avatar_id)
            raise

        logger.info("Avatar generated successfully with ID: %s", avatar_id)
        return GeneratedAvatar(id=avatar_id, created_at=created_at, type=generator_type, images=images)

    def get_record(self, avatar_id: str) -> AvatarRecord:
        record = self.metadata.get(avatar_id)
        if record is None:
            raise AvatarNotFound(avatar_id)
        return record

    def get_image(
        self,
        avatar_id: str,
        size_exponent: int | None = None,
        filter: FilterKind | str | None = None,
    ) -> tuple[AvatarRecord, bytes]:
        """One stored size (default 2^6), optionally filtered."""
        exponent = self.default_size_exponent if size_exponent is None else size_exponent
        size = size_for_exponent(exponent)

        record = self.get_record(avatar_id)
        image = self.storage.load_size(avatar_id, size)
        if filter:
            image = apply_filter_png(image, filter)

        logger.info("Avatar retrieved successfully: %s (%dpx)", avatar_id, size)
        return record, image

    def delete(self, avatar_id: str) -> None:
        self.get_record(avatar_id)
        try:
            self.storage.delete(avatar_id)
        except AvatarNotFound:
            logger.warning("Images for avatar %s already missing, removing metadata only", avatar_id)
        self.metadata.remove(avatar_id)
        logger.info("Avatar deleted successfully: %s", avatar_id)

    def list(self, pick: int = 10, offset: int = 0) -> AvatarPage:
        if not 1 <= pick <= MAX_PAGE_SIZE:
            raise ValidationError(f"pick must be between 1 and {MAX_PAGE_SIZE}")
        if offset < 0:
            raise ValidationError("offset must not be negative")
        records, total = self.metadata.list(pick=pick, offset=offset)
        logger.info("Retrieved %d avatars from %d offset", len(records), offset)
        return AvatarPage(avatars=records, total=total, offset=offset, pick=pick)

    def color_schemes(self, type_name: str | None = None) -> tuple[ColorScheme, ...]:
        return self.renderer.registry.select(type_name).schemes


def create_avatar_service(
    storage: StorageStrategy,
    metadata_path: Path | str,
    renderer: MultiResolutionRenderer | None = None,
    default_size_exponent: int = 6,
) -> AvatarService:
    return AvatarService(
        storage=storage,
        metadata=MetadataStore(metadata_path),
        renderer=renderer,
        default_size_exponent=default_size_exponent,
    )
