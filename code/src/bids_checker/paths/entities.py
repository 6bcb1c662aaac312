"""Entity parsing helpers for BIDS file names and paths."""

import posixpath
from typing import NamedTuple, Optional

# Entities dropped when a file inherits metadata from a less specific location
_LEVEL_EXCLUDED = {
    "root": {"sub", "ses"},
    "subject": {"ses"},
    "session": set(),
}


class ParsedName(NamedTuple):
    """A BIDS file name split into its parts."""

    entities: list[tuple[str, str]]
    suffix: str
    extension: str


def extract_label(path: str, key: str) -> Optional[str]:
    """Extract the first label of an entity from a path.

    The label runs from after "<key>-" up to the next "_" or "/".

    Args:
        path: Dataset-relative path
        key: Entity key (e.g., "sub", "ses")

    Returns:
        The label (e.g., "01" for "sub-01"), or None when the entity is absent
        or its label is empty

    Example:
        >>> extract_label("/sub-01/ses-pre/anat/sub-01_ses-pre_T1w.nii.gz", "ses")
        'pre'
    """
    start = path.find(f"{key}-")
    if start == -1:
        return None
    label = path[start + len(key) + 1 :]
    for separator in ("/", "_"):
        end = label.find(separator)
        if end != -1:
            label = label[:end]
    return label or None


def split_extension(name: str) -> tuple[str, str]:
    """Split a file name at its first dot ("x_bold.nii.gz" -> ("x_bold", ".nii.gz"))."""
    stem, dot, extension = name.partition(".")
    return stem, dot + extension


def parse_name(name: str) -> ParsedName:
    """Parse a BIDS file name into entities, suffix and extension.

    Args:
        name: File base name (e.g., "sub-01_task-rest_run-1_bold.nii.gz")

    Returns:
        ParsedName with entities in file order, e.g.
        ([("sub", "01"), ("task", "rest"), ("run", "1")], "bold", ".nii.gz")
    """
    stem, extension = split_extension(name)
    tokens = stem.split("_")
    suffix = ""
    if tokens and "-" not in tokens[-1]:
        suffix = tokens.pop()
    entities = []
    for token in tokens:
        key, _, value = token.partition("-")
        entities.append((key, value))
    return ParsedName(entities, suffix, extension)


def modality_of(name: str) -> str:
    """Return the modality token of a file name (text between the last "_" and the first ".")."""
    last = name.split("_")[-1]
    return last.split(".", 1)[0]


def _format_name(entities: list[tuple[str, str]], suffix: str, extension: str) -> str:
    tokens = [f"{key}-{value}" for key, value in entities]
    tokens.append(suffix)
    return "_".join(tokens) + extension


def inheritance_candidates(relative_path: str, suffix: str, extension: str) -> list[str]:
    """List the locations a companion file for a data file may live at.

    Locations are ordered from least to most specific: dataset root, subject
    directory, session directory, then the data file's own directory. At each
    level a run-less name comes before the full name, so metadata merged in
    this order lets the more specific file win.

    Args:
        relative_path: Path of the data file (e.g., a NIfTI image)
        suffix: Suffix of the companion (e.g., "bold", "events", "dwi")
        extension: Extension of the companion (e.g., ".json", ".tsv", ".bval")

    Returns:
        Candidate dataset-relative paths, without duplicates
    """
    directory, name = posixpath.split(relative_path)
    entities = parse_name(name).entities
    dir_parts = [part for part in directory.split("/") if part]

    levels: list[tuple[str, set[str]]] = [("/", _LEVEL_EXCLUDED["root"])]
    if dir_parts and dir_parts[0].startswith("sub-"):
        levels.append(("/" + dir_parts[0], _LEVEL_EXCLUDED["subject"]))
        if len(dir_parts) > 1 and dir_parts[1].startswith("ses-"):
            levels.append(("/" + "/".join(dir_parts[:2]), _LEVEL_EXCLUDED["session"]))
    levels.append((directory or "/", set()))

    candidates: list[str] = []
    for level_dir, excluded in levels:
        kept = [(key, value) for key, value in entities if key not in excluded]
        runless = [(key, value) for key, value in kept if key != "run"]
        for variant in (runless, kept):
            candidate = posixpath.join(level_dir, _format_name(variant, suffix, extension))
            if candidate not in candidates:
                candidates.append(candidate)
    return candidates
