"""File-oriented convenience wrappers (producer side)."""

from .main import imglock


def encrypt_file(
    path: str,
    password: str | bytes,
    output: str | None = None,
    kdf: str | None = None,
):
    return imglock.encrypt_file(path, password, output, kdf=kdf)


def decrypt_file(
    path: str,
    password: str | bytes,
    output: str | None = None,
    kdf: str | None = None,
):
    return imglock.decrypt_file(path, password, output, kdf=kdf)


def encrypt_directory(
    input_dir: str = imglock.DEFAULT_INPUT_DIR,
    output_dir: str = imglock.DEFAULT_OUTPUT_DIR,
    password: str | bytes = "",
    *,
    extensions=None,
    kdf: str | None = None,
    silent: bool = False,
):
    return imglock.encrypt_directory(
        input_dir,
        output_dir,
        password,
        extensions=extensions,
        kdf=kdf,
        silent=silent,
    )


def scan_images(directory: str, extensions=None):
    return imglock.scan_images(directory, extensions)


__all__ = [
    "decrypt_file",
    "encrypt_directory",
    "encrypt_file",
    "scan_images",
]
