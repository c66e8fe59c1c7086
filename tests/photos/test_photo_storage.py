import io

import pytest
from werkzeug.datastructures import FileStorage

from src.shop_attendance.shop_attendance.core.exceptions import ValidationError
from src.shop_attendance.shop_attendance.photos.storage import PhotoStorage


def test_save_returns_public_reference(tmp_path):
    storage = PhotoStorage(tmp_path / "uploads")
    ref = storage.save(FileStorage(stream=io.BytesIO(b"jpeg-bytes"), filename="selfie.PNG"))

    assert ref.startswith("/uploads/")
    assert ref.endswith(".png")
    assert (tmp_path / "uploads" / ref.rsplit("/", 1)[1]).read_bytes() == b"jpeg-bytes"


def test_missing_extension_defaults_to_jpg(tmp_path):
    ref = PhotoStorage(tmp_path).save(FileStorage(stream=io.BytesIO(b"x"), filename="blob"))
    assert ref.endswith(".jpg")


def test_names_are_unique(tmp_path):
    storage = PhotoStorage(tmp_path)
    refs = {storage.save(FileStorage(stream=io.BytesIO(b"x"), filename="a.jpg")) for _ in range(5)}
    assert len(refs) == 5


def test_missing_upload_is_rejected(tmp_path):
    storage = PhotoStorage(tmp_path)
    with pytest.raises(ValidationError):
        storage.save(None)
    with pytest.raises(ValidationError):
        storage.save(FileStorage(stream=io.BytesIO(b""), filename=""))


@pytest.mark.parametrize("filename", ["page.html", "logo.svg", "run.sh", "x.JPG.exe"])
def test_non_image_extensions_are_stored_as_jpg(tmp_path, filename):
    ref = PhotoStorage(tmp_path).save(FileStorage(stream=io.BytesIO(b"<script></script>"), filename=filename))
    assert ref.endswith(".jpg")


@pytest.mark.parametrize("filename,ext", [("a.jpeg", ".jpeg"), ("b.WEBP", ".webp"), ("c.png", ".png")])
def test_image_extensions_are_kept(tmp_path, filename, ext):
    ref = PhotoStorage(tmp_path).save(FileStorage(stream=io.BytesIO(b"x"), filename=filename))
    assert ref.endswith(ext)


def test_discard_removes_stored_photo(tmp_path):
    storage = PhotoStorage(tmp_path)
    ref = storage.save(FileStorage(stream=io.BytesIO(b"x"), filename="a.jpg"))

    storage.discard(ref)

    assert list(tmp_path.iterdir()) == []
    storage.discard(ref)


def test_discard_stays_inside_upload_directory(tmp_path):
    outside = tmp_path / "keep.jpg"
    outside.write_bytes(b"x")
    storage = PhotoStorage(tmp_path / "uploads")

    storage.discard("/uploads/../keep.jpg")
    storage.discard("/elsewhere/keep.jpg")

    assert outside.exists()
