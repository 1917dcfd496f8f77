from .main import *
from .version import __version__

def derive_key(password, kdf=None): return imglock.derive_key(password, kdf)
def password_hash(password): return imglock.password_hash(password)
def encode(plaintext, password, kdf=None): return imglock.encode(plaintext, password, kdf)
def decode(buffer, password, kdf=None): return imglock.decode(buffer, password, kdf)

def encrypt_file(path, password, output=None, kdf=None): return imglock.encrypt_file(path, password, output, kdf=kdf)
def decrypt_file(path, password, output=None, kdf=None): return imglock.decrypt_file(path, password, output, kdf=kdf)
def encrypt_directory(input_dir, output_dir, password, *, extensions=None, kdf=None, silent=False):
    return imglock.encrypt_directory(input_dir, output_dir, password, extensions=extensions, kdf=kdf, silent=silent)

def candidate_urls(image_dir=None, extensions=None, max_count=None): return imglock.candidate_urls(image_dir, extensions, max_count)
def load_all(password, config=None): return imglock.load_all(password, config)
def load_images(password, config=None): return imglock.load_images(password, config)
def found_images(results): return imglock.found_images(results)
def to_data_url(data, mime=None): return imglock.to_data_url(data, mime)

ImageDecryptor = imglock.ImageDecryptor
