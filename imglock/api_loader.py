"""Consumer-side helpers: fetch, decrypt and batch-load encrypted images."""

import sys
import warnings

from .main import LoaderConfig, UnexpectedDecodeFailure, imglock


def _with_friendly_warnings(fn, *args, **kwargs):
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", UnexpectedDecodeFailure)
            result = fn(*args, **kwargs)
        for item in caught:
            msg = str(item.message).strip()
            if msg:
                print(f"⚠ {msg}", file=sys.stderr)
        return result
    except KeyboardInterrupt:
        raise KeyboardInterrupt("Exiting...") from None


ImageDecryptor = imglock.ImageDecryptor


def candidate_urls(image_dir: str | None = None, extensions=None, max_count: int | None = None):
    return imglock.candidate_urls(image_dir, extensions, max_count)


def load_encrypted_image(url: str, password: str | bytes, *, kdf: str | None = None, timeout: float | None = None):
    with imglock.ImageDecryptor(password, kdf=kdf, timeout=timeout) as decryptor:
        return decryptor.load_encrypted_image(url)


def load_all(password: str | bytes, config: LoaderConfig | None = None):
    return _with_friendly_warnings(imglock.load_all, password, config)


def load_images(password: str | bytes, config: LoaderConfig | None = None):
    return imglock.found_images(load_all(password, config))


def found_images(results):
    return imglock.found_images(results)


def to_data_url(data: bytes, mime: str | None = None):
    return imglock.to_data_url(data, mime)


__all__ = [
    "ImageDecryptor",
    "LoaderConfig",
    "candidate_urls",
    "found_images",
    "load_all",
    "load_encrypted_image",
    "load_images",
    "to_data_url",
]
