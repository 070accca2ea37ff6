"""Tests for the avatar service."""

import numpy as np
import pytest

from avatarforge.engine.context import CANONICAL_SIZES, GenerationParams
from avatarforge.engine.errors import AvatarNotFound, UnsupportedGeneratorType, ValidationError
from avatarforge.engine.filters import grayscale
from avatarforge.services.avatars import apply_filter_png
from avatarforge.utils.codec import decode_png, encode_png


def test_generate_stores_six_pngs(service, seeded_params):
    avatar = service.generate(seeded_params)
    assert set(avatar.images) == set(CANONICAL_SIZES)
    stored = service.storage.load(avatar.id)
    assert stored == avatar.images
    for size, data in stored.items():
        assert decode_png(data).shape == (size, size, 4)


def test_generate_records_metadata(service):
    avatar = service.generate(GenerationParams(type="Wave", seed="octocat", color_scheme="red"))
    record = service.get_record(avatar.id)
    assert record.type == "wave"
    assert record.seed == "octocat"
    assert record.color_scheme == "red"
    assert record.created_at == avatar.created_at
    assert record.location == f"memory://{avatar.id}"


def test_generate_rejects_before_storing(service):
    with pytest.raises(UnsupportedGeneratorType):
        service.generate(GenerationParams(type="spiral"))
    with pytest.raises(ValidationError):
        service.generate(GenerationParams(seed="x" * 33))
    assert service.metadata.count() == 0


def test_same_seed_same_images(service, seeded_params):
    a = service.generate(seeded_params)
    b = service.generate(seeded_params)
    assert a.id != b.id
    assert a.images == b.images


def test_get_image_default_size(service, seeded_params):
    avatar = service.generate(seeded_params)
    record, image = service.get_image(avatar.id)
    assert record.id == avatar.id
    assert image == avatar.images[64]


def test_get_image_by_exponent(service, seeded_params):
    avatar = service.generate(seeded_params)
    _, image = service.get_image(avatar.id, size_exponent=4)
    assert image == avatar.images[16]
    with pytest.raises(ValidationError):
        service.get_image(avatar.id, size_exponent=10)


def test_get_image_filtered(service, seeded_params):
    avatar = service.generate(seeded_params)
    _, image = service.get_image(avatar.id, size_exponent=5, filter="grayscale")
    expected = grayscale(decode_png(avatar.images[32]))
    assert np.array_equal(decode_png(image), expected)


def test_get_image_unknown_filter_passes_through(service, seeded_params):
    avatar = service.generate(seeded_params)
    _, image = service.get_image(avatar.id, filter="blur")
    assert image == avatar.images[64]


def test_get_missing_avatar(service):
    with pytest.raises(AvatarNotFound):
        service.get_image("does-not-exist")


def test_delete(service, seeded_params):
    avatar = service.generate(seeded_params)
    service.delete(avatar.id)
    with pytest.raises(AvatarNotFound):
        service.get_image(avatar.id)
    assert not service.storage.exists(avatar.id)
    with pytest.raises(AvatarNotFound):
        service.delete(avatar.id)


def test_list_pagination(service):
    ids = [service.generate(GenerationParams(seed=f"s{i}")).id for i in range(3)]
    page = service.list(pick=2, offset=0)
    assert page.total == 3
    assert [r.id for r in page.avatars] == ids[:2]
    assert page.has_more
    last = service.list(pick=2, offset=2)
    assert [r.id for r in last.avatars] == ids[2:]
    assert not last.has_more


@pytest.mark.parametrize("pick,offset", [(0, 0), (101, 0), (10, -1)])
def test_list_bounds(service, pick, offset):
    with pytest.raises(ValidationError):
        service.list(pick=pick, offset=offset)


def test_color_schemes_per_type(service):
    assert len(service.color_schemes("wave")) == 9
    assert len(service.color_schemes("pixelize")) == 17
    assert service.color_schemes(None) == service.color_schemes("pixelize")


def test_apply_filter_png_identity_for_none():
    data = encode_png(np.zeros((4, 4, 4), dtype=np.uint8))
    assert apply_filter_png(data, None) is data
    assert apply_filter_png(data, "unknown") is data


def test_delete_with_images_already_gone(service, seeded_params):
    avatar = service.generate(seeded_params)
    service.storage.delete(avatar.id)
    service.delete(avatar.id)
    assert service.metadata.get(avatar.id) is None
    assert service.list().total == 0


def test_failed_metadata_write_drops_images(service, seeded_params, monkeypatch):
    def fail(record):
        raise OSError("disk full")

    monkeypatch.setattr(service.metadata, "add", fail)
    with pytest.raises(OSError):
        service.generate(seeded_params)
    assert service.storage._avatars == {}
