# hide/service/pipeline.py

"""Main redaction service pipeline."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from hide.core.domain import KeyChange, KeysConfig, RedactionResult
from hide.core.exceptions import DocumentTooDeep
from hide.core.loader import KeysConfigLoader
from hide.engine.keys import InMemoryKeysStorage, apply_key_changes
from hide.engine.walker import RedactionEngine
from hide.service.documents import dump_document, read_document, write_document

logger = logging.getLogger(__name__)


def prepare_store(
    loader: KeysConfigLoader,
    add: Sequence[str] = (),
    remove: Sequence[str] = (),
) -> Tuple[InMemoryKeysStorage, List[KeyChange]]:
    """Builds the key store from persisted config plus command line deltas.

    Additions run before removals. When any delta is given the resulting
    key set is written back through the loader.

    Returns:
        The ready store and the per-key outcomes of the deltas

    Raises:
        ConfigLoadFailed: If the persisted configuration cannot be read
        ConfigStoreFailed: If the updated configuration cannot be written
    """
    config = loader.load()
    store = InMemoryKeysStorage(config.sensitive_keys)

    changes = apply_key_changes(store, add, remove)

    if add or remove:
        failed = [c for c in changes if not c.ok]
        logger.info(
            "Key changes applied",
            extra={"applied": len(changes) - len(failed), "failed": len(failed)},
        )
        loader.save(KeysConfig(sensitive_keys=store.all()))

    return store, changes


def redact_file(
    input_path: Union[str, Path],
    store: InMemoryKeysStorage,
    output_path: Optional[Union[str, Path]] = None,
    indent: int = 2,
) -> RedactionResult:
    """Reads a JSON file, hides the stored keys and emits the result.

    Raises:
        InputReadFailed: If the input cannot be read
        InputParseFailed: If the input is not valid JSON
        DocumentTooDeep: If the redacted document cannot be serialized
        OutputWriteFailed: If the output file cannot be written
    """
    document = read_document(input_path)

    logger.info(
        "Starting redaction request",
        extra={"input_path": str(input_path), "key_count": len(store)},
    )

    result = RedactionEngine(store).process(document)

    try:
        text = dump_document(result.redacted, indent=indent)
    except RecursionError as e:
        raise DocumentTooDeep(input_path) from e

    write_document(text, output_path)

    logger.info(
        f"Redaction successful: {len(result.fields)} fields hidden",
        extra={"paths": [f.path for f in result.fields]},
    )
    return result
