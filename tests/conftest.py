# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar configuración y claves de prueba.
# --------------------------------------------------------------

from pathlib import Path
from typing import Dict, Iterator

import pytest

from textcrypt.keys import generate_keys, key_filenames
from textcrypt.models import AlgorithmTag


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina variables TEXTCRYPT_* del entorno para cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in ("TEXTCRYPT_DEFAULT_FORMAT", "TEXTCRYPT_MAX_INPUT_BYTES", "TEXTCRYPT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def key_dir(tmp_path) -> Dict[str, Path]:
    """Genera y guarda en disco una clave de cada algoritmo.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        Dict[str, Path]: Rutas indexadas por nombre de fichero de clave.
    """
    paths: Dict[str, Path] = {}
    for tag in AlgorithmTag:
        for name, blob in zip(key_filenames(tag), generate_keys(tag)):
            path = tmp_path / name
            path.write_bytes(blob)
            paths[name] = path
    return paths


@pytest.fixture
def input_file(tmp_path) -> Path:
    """Crea un fichero de entrada con contenido de texto conocido."""
    path = tmp_path / "input.txt"
    path.write_bytes(b"hello world\n")
    return path
