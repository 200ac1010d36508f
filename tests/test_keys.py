# --------------------------------------------------------------
# File: test_keys.py
# Description: Pruebas de carga y generación de material de clave.
# --------------------------------------------------------------

import pytest

from textcrypt.crypto_sign import ed25519_sign, ed25519_verify
from textcrypt.errors import KeyFormatError, SourceReadError
from textcrypt.keys import generate_keys, key_filenames, load_key
from textcrypt.models import (
    AlgorithmTag,
    Blake3Key,
    ChaCha20Poly1305Key,
    Ed25519SigningKey,
    Ed25519VerifyingKey,
    KeyRole,
)


@pytest.mark.parametrize("tag", [AlgorithmTag.BLAKE3, AlgorithmTag.CHACHA20POLY1305])
def test_generate_symmetric_returns_one_key(tag):
    """Los algoritmos simétricos generan una única clave de 32 bytes.

    Returns:
        None: Las aserciones validan forma y aleatoriedad.
    """
    keys = generate_keys(tag)
    assert len(keys) == 1
    assert len(keys[0]) == 32
    assert generate_keys(tag) != keys


def test_generate_ed25519_returns_paired_keys():
    """Ed25519 devuelve privada y pública emparejadas.

    Returns:
        None: Se firma con la primera y se verifica con la segunda.
    """
    sk, pk = generate_keys(AlgorithmTag.ED25519)
    assert len(sk) == 32 and len(pk) == 32
    sig = ed25519_sign(Ed25519SigningKey(raw=sk), b"datos arbitrarios")
    assert ed25519_verify(Ed25519VerifyingKey(raw=pk), b"datos arbitrarios", sig)


def test_generate_is_deterministic_with_injected_source():
    """Una fuente aleatoria fija produce siempre las mismas claves."""
    rand = lambda n: b"\x07" * n  # noqa: E731
    assert generate_keys(AlgorithmTag.ED25519, rand) == generate_keys(AlgorithmTag.ED25519, rand)
    assert generate_keys(AlgorithmTag.BLAKE3, rand) == [b"\x07" * 32]


@pytest.mark.parametrize(
    "tag, role, expected",
    [
        (AlgorithmTag.BLAKE3, KeyRole.SIGNER, Blake3Key),
        (AlgorithmTag.BLAKE3, KeyRole.VERIFIER, Blake3Key),
        (AlgorithmTag.ED25519, KeyRole.SIGNER, Ed25519SigningKey),
        (AlgorithmTag.ED25519, KeyRole.VERIFIER, Ed25519VerifyingKey),
        (AlgorithmTag.CHACHA20POLY1305, KeyRole.SIGNER, ChaCha20Poly1305Key),
    ],
)
def test_load_key_from_file_builds_typed_key(tmp_path, tag, role, expected):
    """La clave cargada tiene el tipo de su algoritmo y rol.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        None: Las aserciones comprueban tipo y contenido.
    """
    path = tmp_path / "k.bin"
    path.write_bytes(b"\x05" * 32)
    key = load_key(path, tag, role)
    assert type(key) is expected
    assert key.raw == b"\x05" * 32


def test_load_key_from_buffer():
    """Un colaborador externo puede entregar la clave ya en memoria."""
    key = load_key(b"\x09" * 32, AlgorithmTag.BLAKE3, KeyRole.SIGNER)
    assert isinstance(key, Blake3Key)


def test_load_key_wrong_length_from_file(tmp_path):
    """Una clave de 33 bytes no se recorta: falla por formato.

    Returns:
        None: Se espera KeyFormatError.
    """
    path = tmp_path / "long.key"
    path.write_bytes(b"\x01" * 33)
    with pytest.raises(KeyFormatError):
        load_key(path, AlgorithmTag.BLAKE3, KeyRole.SIGNER)


def test_load_key_missing_file(tmp_path):
    """Un fichero inexistente es un error de lectura."""
    with pytest.raises(SourceReadError):
        load_key(tmp_path / "missing.key", AlgorithmTag.ED25519, KeyRole.SIGNER)


def test_load_key_rejects_stdin():
    """La clave nunca se toma de stdin."""
    with pytest.raises(SourceReadError):
        load_key("-", AlgorithmTag.BLAKE3, KeyRole.SIGNER)


def test_key_filenames():
    """Convención fija de nombres para las claves generadas."""
    assert key_filenames(AlgorithmTag.BLAKE3) == ("blake3.key",)
    assert key_filenames(AlgorithmTag.ED25519) == ("ed25519.sk", "ed25519.pk")
    assert key_filenames("chacha20poly1305") == ("chacha20poly1305.key",)
