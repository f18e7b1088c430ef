import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Tuple, Union

from evlab.domain.errors import Unavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dataset:
    """
    Dataset de EVs cargado una sola vez al arrancar.
    `raw` son los bytes exactos del archivo; se sirven sin re-serializar.
    """
    records: Tuple[Any, ...] = ()
    raw: bytes = b"[]"

    def __len__(self) -> int:
        return len(self.records)

    def get(self) -> bytes:
        if not self.records:
            raise Unavailable()
        return self.raw


EMPTY_DATASET = Dataset()


def _resolve_path(path: Union[str, Path]) -> Path:
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    # relativo al directorio backend/
    return Path(__file__).resolve().parents[2] / p


def load_dataset(path: Union[str, Path]) -> Dataset:
    """
    Lee y valida el JSON del dataset.
    Cualquier fallo degrada a un dataset vacio (se loguea, no es fatal).
    """
    target = _resolve_path(path)

    try:
        raw = target.read_bytes()
    except FileNotFoundError:
        logger.warning(f"Dataset no encontrado: {target}")
        return EMPTY_DATASET
    except OSError as e:
        logger.warning(f"No se pudo leer el dataset {target}: {e}")
        return EMPTY_DATASET

    try:
        records = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        logger.warning(f"Dataset con JSON invalido ({target}): {e}")
        return EMPTY_DATASET

    if not isinstance(records, list):
        logger.warning(f"Dataset {target} no es un arreglo JSON")
        return EMPTY_DATASET

    logger.info(f"Dataset cargado: {len(records)} registros desde {target}")
    return Dataset(records=tuple(records), raw=raw)
