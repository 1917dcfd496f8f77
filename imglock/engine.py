# IMGLOCK IMAGE ENCRYPTION ENGINE ->

import os as _os_module
import sys as _sys_module
import warnings as _warnings_module
from dataclasses import dataclass
from enum import Enum


class ImglockError(Exception):
    """Base class for every imglock failure."""


class DecryptionError(ImglockError, ValueError):
    """Raised when a buffer cannot be decrypted (wrong password or corrupted data)."""


class FramingError(DecryptionError):
    """Raised when a buffer is too short to even carry the IV."""


class EncodeError(ImglockError, RuntimeError):
    """Raised when a single plaintext or file cannot be encrypted."""


class TransportError(ImglockError, OSError):
    """Raised when an encrypted asset cannot be fetched."""

    def __init__(self, url: str, message: str, status: "int | None" = None):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status = status


class UnexpectedDecodeFailure(UserWarning):
    """An asset was fetched but did not decrypt."""


class LoadStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not-found"
    DECODE_FAILED = "decode-failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class LoadResult:
    url: str
    status: LoadStatus
    data: "bytes | None" = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.FOUND


class imglock:
    import base64
    import concurrent.futures
    import hashlib
    import pathlib
    import secrets
    import sys
    import threading
    import time
    import typing
    import urllib.parse
    import urllib.request
    import os
    from io import BytesIO
    try:
        from PIL import Image
    except Exception:  # pragma: no cover - optional dependency
        Image = None
    import requests
    from cryptography.hazmat.primitives import hashes, padding
    from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
    from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
    try:
        from argon2.low_level import hash_secret_raw as _argon2_hash_secret_raw, Type as _Argon2Type
    except Exception:  # pragma: no cover - optional dependency
        _argon2_hash_secret_raw = None
        _Argon2Type = None

    ENGINE_VERSION = "1.0.0"

    # Wire format: IV(16) || AES-256-CBC(PKCS#7(plaintext)). No header, no tag.
    IV_SIZE = 16
    KEY_SIZE = 32
    BLOCK_BITS = 128
    ENC_SUFFIX = ".enc"

    PRODUCER_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".bmp", ".gif")
    LOADER_EXTENSIONS = ("jpg", "jpeg", "png", "webp", "bmp")
    DEFAULT_INPUT_DIR = "./images"
    DEFAULT_OUTPUT_DIR = "./images-encrypted"
    DEFAULT_IMAGE_DIR = "./images"
    DEFAULT_MAX_COUNT = 200
    PROGRESS_BAR_WIDTH = 30
    OCTET_STREAM = "application/octet-stream"

    SUCCESS = "SUCCESS!"
    FAIL = "FAIL!"

    @staticmethod
    def _env_int(name: str) -> "imglock.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    @staticmethod
    def _env_float(name: str) -> "imglock.typing.Optional[float]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = float(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    # sha256 is the only scheme old viewers understand; the slow KDFs are opt-in
    # and must be selected identically on both sides.
    KDF_CHOICES = ("sha256", "pbkdf2", "argon2id")
    KDF = (os.getenv("IMGLOCK_KDF") or "sha256").strip().lower()
    KDF_ITERATIONS = _env_int("IMGLOCK_KDF_ITERS") or 600_000
    KDF_SALT = (os.getenv("IMGLOCK_KDF_SALT") or "imglock/v1").encode("utf-8")
    ARGON2_TIME_COST = 3
    ARGON2_MEMORY_COST = 2 ** 16
    ARGON2_PARALLELISM = 4

    FETCH_TIMEOUT = _env_float("IMGLOCK_FETCH_TIMEOUT") or 10.0
    WORKERS = _env_int("IMGLOCK_WORKERS") or 1

    # ------------------------------------------------------------------
    # Key derivation
    # ------------------------------------------------------------------

    @staticmethod
    def _password_bytes(password: "imglock.typing.Union[str, bytes, bytearray, memoryview]") -> bytes:
        if isinstance(password, (bytes, bytearray, memoryview)):
            return bytes(password)
        if isinstance(password, str):
            return password.encode("utf-8")
        raise TypeError(f"Password must be str or bytes, not {type(password).__name__}")

    @staticmethod
    def _resolve_kdf(kdf: "imglock.typing.Optional[str]") -> str:
        name = (kdf or imglock.KDF).strip().lower()
        if name not in imglock.KDF_CHOICES:
            raise ValueError(f"Unsupported KDF '{name}' (expected one of {', '.join(imglock.KDF_CHOICES)})")
        if name == "argon2id" and imglock._argon2_hash_secret_raw is None:
            raise RuntimeError("argon2-cffi is required for the argon2id KDF (pip install argon2-cffi)")
        return name

    @staticmethod
    def derive_key(
        password: "imglock.typing.Union[str, bytes, bytearray, memoryview]",
        kdf: "imglock.typing.Optional[str]" = None
    ) -> bytes:
        """
        Turn a password into the 32-byte AES-256 key.

        The default ``sha256`` scheme is a single unsalted SHA-256 pass over the
        UTF-8 password. It is fast and therefore weak against offline guessing;
        it stays the default because every published asset depends on it.
        """
        secret = imglock._password_bytes(password)
        name = imglock._resolve_kdf(kdf)
        if name == "sha256":
            return imglock.hashlib.sha256(secret).digest()
        if name == "pbkdf2":
            kdf_obj = imglock.PBKDF2HMAC(
                algorithm=imglock.hashes.SHA256(),
                length=imglock.KEY_SIZE,
                salt=imglock.KDF_SALT,
                iterations=imglock.KDF_ITERATIONS,
            )
            return kdf_obj.derive(secret)
        return imglock._argon2_hash_secret_raw(
            secret,
            imglock.KDF_SALT,
            time_cost=imglock.ARGON2_TIME_COST,
            memory_cost=imglock.ARGON2_MEMORY_COST,
            parallelism=imglock.ARGON2_PARALLELISM,
            hash_len=imglock.KEY_SIZE,
            type=imglock._Argon2Type.ID,
        )

    @staticmethod
    def password_hash(password: "imglock.typing.Union[str, bytes]") -> str:
        return imglock.hashlib.sha256(imglock._password_bytes(password)).hexdigest()

    # ------------------------------------------------------------------
    # Single-buffer encode / decode
    # ------------------------------------------------------------------

    @staticmethod
    def _encode_with_key(plaintext, key: bytes) -> bytes:
        try:
            data = memoryview(plaintext).tobytes()
        except TypeError as exc:
            raise EncodeError(f"Plaintext must be bytes-like, not {type(plaintext).__name__}") from exc
        iv = imglock.secrets.token_bytes(imglock.IV_SIZE)
        try:
            padder = imglock.padding.PKCS7(imglock.BLOCK_BITS).padder()
            padded = padder.update(data) + padder.finalize()
            encryptor = imglock.Cipher(imglock.algorithms.AES(key), imglock.modes.CBC(iv)).encryptor()
            ciphertext = encryptor.update(padded) + encryptor.finalize()
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"Encryption failed: {exc}") from exc
        return iv + ciphertext

    @staticmethod
    def _decode_with_key(buffer, key: bytes) -> bytes:
        try:
            data = memoryview(buffer).tobytes()
        except TypeError as exc:
            raise FramingError(f"Encrypted buffer must be bytes-like, not {type(buffer).__name__}") from exc
        if len(data) < imglock.IV_SIZE:
            raise FramingError(
                f"Encrypted buffer is {len(data)} bytes; at least {imglock.IV_SIZE} are needed for the IV"
            )
        iv = data[:imglock.IV_SIZE]
        ciphertext = data[imglock.IV_SIZE:]
        try:
            decryptor = imglock.Cipher(imglock.algorithms.AES(key), imglock.modes.CBC(iv)).decryptor()
            padded = decryptor.update(ciphertext) + decryptor.finalize()
            unpadder = imglock.padding.PKCS7(imglock.BLOCK_BITS).unpadder()
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            # One message for every cipher/padding failure.
            raise DecryptionError("Unable to decrypt image (wrong password or corrupted data)") from exc

    @staticmethod
    def encode(plaintext, password, kdf: "imglock.typing.Optional[str]" = None) -> bytes:
        return imglock._encode_with_key(plaintext, imglock.derive_key(password, kdf))

    @staticmethod
    def decode(buffer, password, kdf: "imglock.typing.Optional[str]" = None) -> bytes:
        return imglock._decode_with_key(buffer, imglock.derive_key(password, kdf))

    # ------------------------------------------------------------------
    # Producer side: files and directories
    # ------------------------------------------------------------------

    @staticmethod
    def _normalize_path(path) -> "imglock.pathlib.Path":
        return imglock.pathlib.Path(path).expanduser()

    @staticmethod
    def _ensure_existing_file(path: "imglock.pathlib.Path") -> None:
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

    @staticmethod
    def _default_encrypted_path(path: "imglock.pathlib.Path") -> "imglock.pathlib.Path":
        return path.with_name(path.name + imglock.ENC_SUFFIX)

    @staticmethod
    def _default_decrypted_path(path: "imglock.pathlib.Path") -> "imglock.pathlib.Path":
        name = path.name
        if name.lower().endswith(imglock.ENC_SUFFIX) and len(name) > len(imglock.ENC_SUFFIX):
            return path.with_name(name[:-len(imglock.ENC_SUFFIX)])
        return path.with_name(name + ".dec")

    @staticmethod
    def _encrypt_path(source: "imglock.pathlib.Path", target: "imglock.pathlib.Path", key: bytes) -> None:
        try:
            imglock._ensure_existing_file(source)
            blob = imglock._encode_with_key(source.read_bytes(), key)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(blob)
        except OSError as exc:
            raise EncodeError(f"{source.name}: {exc}") from exc

    @staticmethod
    def encrypt_file(path, password, output=None, kdf: "imglock.typing.Optional[str]" = None) -> "imglock.pathlib.Path":
        source = imglock._normalize_path(path)
        target = imglock._normalize_path(output) if output else imglock._default_encrypted_path(source)
        imglock._encrypt_path(source, target, imglock.derive_key(password, kdf))
        return target

    @staticmethod
    def decrypt_file(path, password, output=None, kdf: "imglock.typing.Optional[str]" = None) -> "imglock.pathlib.Path":
        source = imglock._normalize_path(path)
        imglock._ensure_existing_file(source)
        target = imglock._normalize_path(output) if output else imglock._default_decrypted_path(source)
        plaintext = imglock.decode(source.read_bytes(), password, kdf)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(plaintext)
        return target

    @staticmethod
    def scan_images(directory, extensions=None) -> "imglock.typing.List[imglock.pathlib.Path]":
        """List the image files directly inside ``directory``, sorted by name."""
        root = imglock._normalize_path(directory)
        if isinstance(extensions, str):
            extensions = [extensions]
        wanted = {
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in (imglock.PRODUCER_EXTENSIONS if extensions is None else extensions)
        }
        return sorted(
            (entry for entry in root.iterdir() if entry.is_file() and entry.suffix.lower() in wanted),
            key=lambda entry: entry.name,
        )

    @staticmethod
    def encrypt_directory(
            input_dir,
            output_dir,
            password,
            *,
            extensions=None,
            kdf: "imglock.typing.Optional[str]" = None,
            silent: bool = False
    ) -> "dict[str, str]":
        """
        Encrypt every image in ``input_dir`` into ``output_dir`` as ``<name>.enc``.

        Returns a ``{path: status}`` map where status is ``SUCCESS!`` or
        ``FAIL! <reason>``. A failing file never stops the rest of the batch;
        only a missing input directory aborts the run.
        """
        source_dir = imglock._normalize_path(input_dir)
        if not source_dir.is_dir():
            raise FileNotFoundError(f"Input directory not found: {source_dir}")
        target_dir = imglock._normalize_path(output_dir)
        target_dir.mkdir(parents=True, exist_ok=True)

        files = imglock.scan_images(source_dir, extensions)
        key = imglock.derive_key(password, kdf)
        reporter = imglock._ProgressReporter(len(files)) if files and not silent else None
        results: "dict[str, str]" = {}
        try:
            for idx, path in enumerate(files, 1):
                target = target_dir / (path.name + imglock.ENC_SUFFIX)
                try:
                    imglock._encrypt_path(path, target, key)
                    results[str(path)] = imglock.SUCCESS
                except EncodeError as exc:
                    results[str(path)] = f"{imglock.FAIL} {exc}"
                    if reporter:
                        reporter.message(f"Failed to encrypt {path}: {exc}")
                if reporter:
                    reporter.update(idx, path.name)
        finally:
            if reporter:
                reporter.finish()
        return results

    class _ProgressReporter:
        """Single-line textual progress bar shared by batch encryption and scans."""

        def __init__(self, total: int, stream=None, min_interval: float = 0.1):
            self.total = max(int(total), 1)
            self.stream = stream or imglock.sys.stdout
            self._min_interval = max(0.0, float(min_interval))
            self._is_tty = bool(getattr(self.stream, "isatty", lambda: False)())
            self._printed = False
            self._last_render = 0.0
            self._lock = imglock.threading.Lock()
            try:
                import colorama
                self._green = colorama.Fore.GREEN
                self._reset = colorama.Fore.RESET
            except ImportError:
                self._green = ""
                self._reset = ""

        def _render_bar(self, fraction: float) -> str:
            width = imglock.PROGRESS_BAR_WIDTH
            fraction = max(0.0, min(1.0, fraction))
            filled = int(fraction * width)
            if filled >= width:
                return f"({self._green}{'❚' * width}{self._reset})"
            return f"({'❚' * filled}{' ' * (width - filled)})"

        def update(self, completed: int, label: str = "") -> None:
            with self._lock:
                now = imglock.time.monotonic()
                final = completed >= self.total
                if not final and self._printed and (now - self._last_render) < self._min_interval:
                    return
                fraction = completed / self.total
                line = f"{self._render_bar(fraction)} {fraction * 100:3.0f}% {completed}/{self.total}"
                if label:
                    line += f" [{label}]"
                if self._is_tty:
                    self.stream.write("\r\x1b[2K" + line)
                elif final or not self._printed:
                    # Non-TTY: first and last state only.
                    self.stream.write(line + "\n")
                self.stream.flush()
                self._printed = True
                self._last_render = now

        def message(self, text: str) -> None:
            with self._lock:
                if self._is_tty and self._printed:
                    # Clear the bar; the next update redraws it below the message.
                    self.stream.write("\r\x1b[2K")
                    self._printed = False
                self.stream.write(text + "\n")
                self.stream.flush()

        def finish(self) -> None:
            with self._lock:
                if self._printed and self._is_tty:
                    self.stream.write("\n")
                    self.stream.flush()
                self._printed = False

    # ------------------------------------------------------------------
    # Consumer side: fetch, decrypt, batch load
    # ------------------------------------------------------------------

    @staticmethod
    def candidate_urls(image_dir=None, extensions=None, max_count=None) -> "imglock.typing.List[str]":
        """Probe list ``{image_dir}/{i}.{ext}.enc`` in index-then-extension order."""
        prefix = str(imglock.DEFAULT_IMAGE_DIR if image_dir is None else image_dir).rstrip("/")
        if isinstance(extensions, str):
            extensions = [extensions]
        exts = [ext.lstrip(".") for ext in (imglock.LOADER_EXTENSIONS if extensions is None else extensions)]
        count = imglock.DEFAULT_MAX_COUNT if max_count is None else int(max_count)
        if count < 0:
            raise ValueError("max_count must be >= 0")
        return [
            f"{prefix}/{index}.{ext}{imglock.ENC_SUFFIX}"
            for index in range(1, count + 1)
            for ext in exts
        ]

    @staticmethod
    def _is_http_url(url: str) -> bool:
        scheme = imglock.urllib.parse.urlparse(url).scheme.lower()
        return scheme in ("http", "https")

    @staticmethod
    def _local_path(url: str) -> "imglock.pathlib.Path":
        if url.lower().startswith("file://"):
            parsed = imglock.urllib.parse.urlparse(url)
            return imglock.pathlib.Path(imglock.urllib.request.url2pathname(parsed.path))
        return imglock.pathlib.Path(url)

    @staticmethod
    def sniff_mime(data: bytes) -> str:
        if imglock.Image is None:
            return imglock.OCTET_STREAM
        try:
            with imglock.Image.open(imglock.BytesIO(data)) as img:
                format_name = img.format
        except (OSError, ValueError):
            return imglock.OCTET_STREAM
        if not format_name:
            return imglock.OCTET_STREAM
        return imglock.Image.MIME.get(format_name.upper(), imglock.OCTET_STREAM)

    @staticmethod
    def to_data_url(data: bytes, mime: "imglock.typing.Optional[str]" = None) -> str:
        mime = mime or imglock.sniff_mime(data)
        encoded = imglock.base64.b64encode(data).decode("ascii")
        return f"data:{mime};base64,{encoded}"

    class ImageDecryptor:
        """
        Fetches ``.enc`` assets and recovers the original image bytes.

        The key is derived once per instance. ``http(s)://`` identifiers go
        through a shared ``requests.Session``; anything else is read from the
        local filesystem (plain paths or ``file://`` URLs).
        """

        def __init__(
            self,
            password,
            *,
            kdf: "imglock.typing.Optional[str]" = None,
            timeout: "imglock.typing.Optional[float]" = None,
            session=None
        ):
            self._key = imglock.derive_key(password, kdf)
            self.timeout = imglock.FETCH_TIMEOUT if timeout is None else float(timeout)
            self._session = session
            self._owns_session = session is None
            self._session_lock = imglock.threading.Lock()

        def __enter__(self) -> "imglock.ImageDecryptor":
            return self

        def __exit__(self, exc_type, exc, tb) -> None:
            self.close()

        def close(self) -> None:
            with self._session_lock:
                if self._owns_session and self._session is not None:
                    self._session.close()
                    self._session = None

        def _http(self):
            with self._session_lock:
                if self._session is None:
                    self._session = imglock.requests.Session()
                return self._session

        def decrypt_image(self, encrypted_data) -> bytes:
            return imglock._decode_with_key(encrypted_data, self._key)

        def fetch(self, url: str) -> bytes:
            if imglock._is_http_url(url):
                try:
                    response = self._http().get(url, timeout=self.timeout)
                except imglock.requests.exceptions.RequestException as exc:
                    raise TransportError(url, f"request failed: {exc}") from exc
                if not response.ok:
                    reason = f"HTTP {response.status_code} {response.reason or ''}".strip()
                    raise TransportError(url, reason, status=response.status_code)
                return response.content
            path = imglock._local_path(url)
            try:
                return path.read_bytes()
            except (OSError, ValueError) as exc:
                raise TransportError(url, getattr(exc, "strerror", None) or str(exc)) from exc

        def load_encrypted_image(self, url: str) -> bytes:
            return self.decrypt_image(self.fetch(url))

        def load_data_url(self, url: str) -> str:
            return imglock.to_data_url(self.load_encrypted_image(url))

        def load_one(self, url: str) -> LoadResult:
            """Fetch and decrypt one candidate; item failures become tagged results."""
            try:
                payload = self.fetch(url)
            except TransportError as exc:
                # Missing slots are the common case while probing.
                return LoadResult(url, LoadStatus.NOT_FOUND, reason=str(exc))
            try:
                data = self.decrypt_image(payload)
            except DecryptionError as exc:
                _warnings_module.warn(
                    f"Skipping undecryptable image: {url} ({exc})",
                    UnexpectedDecodeFailure,
                    stacklevel=2,
                )
                return LoadResult(url, LoadStatus.DECODE_FAILED, reason=str(exc))
            return LoadResult(url, LoadStatus.FOUND, data=data)

        def load_multiple_images(
            self,
            urls,
            on_progress=None,
            *,
            workers: int = 1,
            cancel_event=None
        ) -> "imglock.typing.List[LoadResult]":
            urls = list(urls)
            total = len(urls)
            slots: "list[imglock.typing.Optional[LoadResult]]" = [None] * total
            completed = 0
            progress_lock = imglock.threading.Lock()

            def _cancelled() -> bool:
                return cancel_event is not None and cancel_event.is_set()

            def _record(idx: int, result: LoadResult) -> None:
                nonlocal completed
                with progress_lock:
                    slots[idx] = result
                    completed += 1
                    if on_progress is not None:
                        on_progress(completed, total, result.url)

            def _run(idx: int, url: str) -> None:
                if _cancelled():
                    return
                _record(idx, self.load_one(url))

            workers = max(1, int(workers or 1))
            if workers == 1 or total <= 1:
                for idx, url in enumerate(urls):
                    if _cancelled():
                        break
                    _record(idx, self.load_one(url))
            else:
                executor = imglock.concurrent.futures.ThreadPoolExecutor(max_workers=min(workers, total))
                shutdown_now = False
                try:
                    futures = [executor.submit(_run, idx, url) for idx, url in enumerate(urls)]
                    for future in futures:
                        future.result()
                except KeyboardInterrupt:
                    shutdown_now = True
                    raise
                finally:
                    executor.shutdown(wait=not shutdown_now, cancel_futures=True)

            return [
                result if result is not None else LoadResult(url, LoadStatus.CANCELLED, reason="cancelled")
                for result, url in zip(slots, urls)
            ]

    @staticmethod
    def found_images(results) -> "imglock.typing.List[bytes]":
        return [result.data for result in results if result.ok]

    @staticmethod
    def load_all(password, config: "imglock.typing.Optional[LoaderConfig]" = None) -> "imglock.typing.List[LoadResult]":
        """Probe every candidate of ``config`` and return one result per candidate, in order."""
        cfg = config or LoaderConfig()
        urls = imglock.candidate_urls(cfg.image_dir, cfg.extensions, cfg.max_count)
        with imglock.ImageDecryptor(password, kdf=cfg.kdf, timeout=cfg.timeout) as decryptor:
            return decryptor.load_multiple_images(
                urls,
                cfg.on_progress,
                workers=cfg.workers or imglock.WORKERS,
                cancel_event=cfg.cancel_event,
            )

    @staticmethod
    def load_images(password, config: "imglock.typing.Optional[LoaderConfig]" = None) -> "imglock.typing.List[bytes]":
        return imglock.found_images(imglock.load_all(password, config))


@dataclass(frozen=True)
class LoaderConfig:
    image_dir: str = imglock.DEFAULT_IMAGE_DIR
    extensions: "tuple[str, ...]" = imglock.LOADER_EXTENSIONS
    max_count: int = imglock.DEFAULT_MAX_COUNT
    on_progress: "object | None" = None
    workers: "int | None" = None
    timeout: "float | None" = None
    kdf: "str | None" = None
    cancel_event: "object | None" = None


def cli(argv=None) -> int:
    import argparse
    import getpass

    def _cli_config_path() -> "imglock.pathlib.Path":
        cfg = _os_module.getenv("IMGLOCK_CLI_CONFIG")
        if cfg:
            return imglock.pathlib.Path(cfg).expanduser()
        xdg = _os_module.getenv("XDG_CONFIG_HOME")
        if xdg:
            return imglock.pathlib.Path(xdg) / "imglock" / "cli.conf"
        appdata = _os_module.getenv("APPDATA")
        if appdata:
            return imglock.pathlib.Path(appdata) / "imglock" / "cli.conf"
        return imglock.pathlib.Path("~/.config/imglock/cli.conf").expanduser()

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("IMGLOCK_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("IMGLOCK_CLI_STYLE") or "").strip().lower()
        if style in {"plain", "boring", "0", "false", "off"}:
            return True
        if style in {"color", "emoji", "on"}:
            return False
        cfg_path = _cli_config_path()
        try:
            if cfg_path.exists():
                data = cfg_path.read_text(encoding="utf-8").lower()
                if "plain=1" in data or "plain=true" in data or "style=plain" in data:
                    return True
        except OSError:
            pass
        return False

    class _CliTheme:
        def __init__(self, plain: bool):
            self.plain = plain
            self.reset = "" if plain else "\033[0m"
            self.bold = "" if plain else "\033[1m"
            self.red = "" if plain else "\033[31m"
            self.green = "" if plain else "\033[32m"
            self.yellow = "" if plain else "\033[33m"
            self.cyan = "" if plain else "\033[36m"

        def _wrap(self, msg: str, color: str, emoji: str | None = None) -> str:
            if self.plain:
                return msg
            prefix = f"{emoji} " if emoji else ""
            return f"{self.bold}{color}{prefix}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green, "✅")

        def warn(self, msg: str) -> str:
            return self._wrap(msg, self.yellow, "⚠️")

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red, "❌")

        def info(self, msg: str) -> str:
            return self._wrap(msg, self.cyan, "✨")

    theme = _CliTheme(_cli_plain_mode())

    def _read_password(args, prompt: str) -> "str | None":
        password = args.password
        if password is None:
            password = getpass.getpass(prompt)
        if not password or not password.strip():
            print(theme.err("Password must not be empty"), file=_sys_module.stderr)
            return None
        return password

    def _add_password(sub) -> None:
        sub.add_argument(
            "-p", "--password",
            default=None,
            help="Password (prompted with hidden input when omitted)"
        )

    def _add_kdf(sub) -> None:
        sub.add_argument(
            "--kdf",
            choices=imglock.KDF_CHOICES,
            default=None,
            help="Key derivation scheme (default: IMGLOCK_KDF or sha256)"
        )

    parser = argparse.ArgumentParser(prog="imglock", description="Password-protect published image assets")
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc_dir = subparsers.add_parser("encrypt-dir", help="Encrypt every image in a directory to <name>.enc")
    enc_dir.add_argument("-i", "--input", default=imglock.DEFAULT_INPUT_DIR, help="Directory holding the source images")
    enc_dir.add_argument("-o", "--output", default=imglock.DEFAULT_OUTPUT_DIR, help="Directory receiving .enc files")
    enc_dir.add_argument("--ext", nargs="+", default=None, help="Image extensions to include")
    enc_dir.add_argument("-q", "--quiet", action="store_true", help="Hide the progress bar")
    _add_password(enc_dir)
    _add_kdf(enc_dir)

    enc = subparsers.add_parser("encrypt", help="Encrypt a single file")
    enc.add_argument("input", help="Input file path")
    enc.add_argument("-o", "--output", default=None, help="Output path (default: <input>.enc)")
    _add_password(enc)
    _add_kdf(enc)

    dec = subparsers.add_parser("decrypt", help="Decrypt a single .enc file")
    dec.add_argument("input", help="Encrypted file path")
    dec.add_argument("-o", "--output", default=None, help="Output path (default: input without .enc)")
    _add_password(dec)
    _add_kdf(dec)

    scan = subparsers.add_parser("scan", help="Probe {prefix}/{i}.{ext}.enc candidates and decrypt what exists")
    scan.add_argument("prefix", help="Directory or base URL of the encrypted images")
    scan.add_argument("--max-count", type=int, default=imglock.DEFAULT_MAX_COUNT, help="Highest index to probe")
    scan.add_argument("--ext", nargs="+", default=None, help="Extensions to probe")
    scan.add_argument("--workers", type=int, default=None, help="Parallel fetches (default: IMGLOCK_WORKERS or 1)")
    scan.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    scan.add_argument("-o", "--output", default=None, help="Write recovered images into this directory")
    scan.add_argument("-q", "--quiet", action="store_true", help="Hide the progress bar")
    _add_password(scan)
    _add_kdf(scan)

    hash_cmd = subparsers.add_parser("hash", help="Print the SHA-256 hash of a password")
    _add_password(hash_cmd)

    args = parser.parse_args(argv)

    if args.command == "hash":
        password = _read_password(args, "🔑 Password: ")
        if password is None:
            return 1
        print(imglock.password_hash(password))
        return 0

    if args.command == "encrypt-dir":
        password = _read_password(args, "🔑 Password (must match the one viewers will use): ")
        if password is None:
            return 1
        print(theme.info(f"Password hash: {imglock.password_hash(password)}"))
        print(theme.warn("Make sure this hash matches the value configured on the viewing side"))
        try:
            results = imglock.encrypt_directory(
                args.input,
                args.output,
                password,
                extensions=args.ext,
                kdf=args.kdf,
                silent=args.quiet
            )
        except (OSError, ValueError, RuntimeError) as exc:
            print(theme.err(f"Encryption aborted: {exc}"))
            return 1
        if not results:
            print(theme.warn(f"No images found in {args.input}"))
            return 0
        failures = 0
        for path, status in results.items():
            if status == imglock.SUCCESS:
                print(theme.ok(f"{path}: {status}"))
            else:
                failures += 1
                print(theme.err(f"{path}: {status}"))
        print("=" * 60)
        print(theme.info(f"Encrypted {len(results) - failures}/{len(results)} images into {args.output}/"))
        print("=" * 60)
        if not args.quiet:
            print("Next steps:")
            print(f"  1. Keep {args.input}/ out of the published tree")
            print(f"  2. Publish the contents of {args.output}/ in its place")
            print("  3. Share the password with viewers out of band")
        return 0 if failures == 0 else 1

    if args.command == "encrypt":
        password = _read_password(args, "🔑 Password: ")
        if password is None:
            return 1
        try:
            out_path = imglock.encrypt_file(args.input, password, args.output, kdf=args.kdf)
        except (EncodeError, ValueError, RuntimeError) as exc:
            print(theme.err(f"Encryption failed: {exc}"))
            return 1
        print(theme.ok(f"Wrote {out_path}"))
        return 0

    if args.command == "decrypt":
        password = _read_password(args, "🔑 Password: ")
        if password is None:
            return 1
        try:
            out_path = imglock.decrypt_file(args.input, password, args.output, kdf=args.kdf)
        except (DecryptionError, OSError, ValueError, RuntimeError) as exc:
            print(theme.err(f"Decryption failed: {exc}"))
            return 1
        print(theme.ok(f"Wrote {out_path}"))
        return 0

    if args.command == "scan":
        from .api_loader import load_all

        password = _read_password(args, "🔑 Password: ")
        if password is None:
            return 1
        extensions = tuple(args.ext) if args.ext else imglock.LOADER_EXTENSIONS
        try:
            total = len(imglock.candidate_urls(args.prefix, extensions, args.max_count))
        except ValueError as exc:
            print(theme.err(str(exc)))
            return 1
        reporter = imglock._ProgressReporter(total) if total and not args.quiet else None

        def _on_progress(done: int, _total: int, url: str) -> None:
            reporter.update(done, url.rsplit("/", 1)[-1])

        config = LoaderConfig(
            image_dir=args.prefix,
            extensions=extensions,
            max_count=args.max_count,
            on_progress=_on_progress if reporter else None,
            workers=args.workers,
            timeout=args.timeout,
            kdf=args.kdf,
        )
        try:
            results = load_all(password, config)
        except (ValueError, RuntimeError) as exc:
            print(theme.err(f"Scan failed: {exc}"))
            return 1
        finally:
            if reporter:
                reporter.finish()
        found = [result for result in results if result.ok]
        if args.output and found:
            out_dir = imglock._normalize_path(args.output)
            out_dir.mkdir(parents=True, exist_ok=True)
            for result in found:
                name = imglock._default_decrypted_path(imglock.pathlib.Path(result.url.rsplit("/", 1)[-1])).name
                (out_dir / name).write_bytes(result.data)
        if found:
            print(theme.ok(f"Recovered {len(found)} images ({len(results)} candidates probed)"))
        else:
            print(theme.warn(f"No images recovered ({len(results)} candidates probed)"))
        return 0

    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
