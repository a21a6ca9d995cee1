"""Exporting variable groups to JSON and importing them into a project."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence, Union

from azdo_vargroups.client import HttpTransport
from azdo_vargroups.errors import ExportWriteError, GroupFileError, InvalidGroupError, VariableGroupNotFoundError
from azdo_vargroups.models import WRITE_API_VERSION, ApiRequest, Session, VariableGroup, WriteResult
from azdo_vargroups.reader import VariableGroupReader, collection_url

# One group as accepted by the import entry points
GroupInput = Union[str, bytes, dict, VariableGroup]


def serialize_group(group: VariableGroup) -> str:
    return json.dumps(group.to_dict(), indent=2, ensure_ascii=False)


def parse_group(group: GroupInput) -> dict:
    """Turn JSON text, a dict or a VariableGroup into the request body for a write."""
    if isinstance(group, VariableGroup):
        return group.to_dict()
    if isinstance(group, (str, bytes)):
        try:
            group = json.loads(group)
        except ValueError as e:
            raise InvalidGroupError(f"Variable group is not valid JSON: {e}") from e
    if not isinstance(group, dict):
        raise InvalidGroupError(f"Variable group must be a JSON object, got {type(group).__name__}")
    if not isinstance(group.get("name"), str) or not group["name"]:
        raise InvalidGroupError("Variable group has no 'name'")
    return group


def export_path(destination_dir: Path | str, group: VariableGroup) -> Path:
    """File a group is exported to. Names that would leave ``destination_dir`` are refused."""
    path = Path(destination_dir) / f"{group.name}.json"
    if any(c in group.name for c in ("/", "\\", "\x00")):
        raise GroupFileError(f"Variable group name {group.name!r} is not usable as a file name", path)
    return path


class VariableGroupWriter:
    """Serializes variable groups and creates or updates them remotely."""

    def __init__(
        self,
        session: Session,
        transport: HttpTransport | None = None,
        reader: VariableGroupReader | None = None,
    ):
        self.session = session
        self.transport = transport or HttpTransport()
        self.reader = reader or VariableGroupReader(session, self.transport)
        self.logger = logging.getLogger("azdo-vargroups")

    # -- Export --

    def export(
        self,
        project_name: str,
        names: Sequence[str] | None = None,
        source: Sequence[VariableGroup] | None = None,
        destination_dir: Path | str | None = None,
    ) -> list[str]:
        """
        Serialize groups to JSON, optionally writing one ``{name}.json`` per group.

        ``source`` skips the lookup and exports the given groups as they are.
        A file that cannot be written does not stop the others; all failures
        are raised together as ExportWriteError once the batch is done.
        """
        groups = list(source) if source is not None else self.reader.list(project_name, names)

        if destination_dir is not None:
            try:
                Path(destination_dir).mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise GroupFileError(f"Cannot create export directory {destination_dir}: {e}", destination_dir) from e

        serialized: list[str] = []
        failures: list[tuple[Path, Exception]] = []
        for group in groups:
            text = serialize_group(group)
            serialized.append(text)
            if destination_dir is None:
                continue
            path = Path(destination_dir) / f"{group.name}.json"
            try:
                export_path(destination_dir, group).write_text(text, encoding="utf-8")
            except (OSError, ValueError) as e:
                self.logger.error(f"Could not write {path}: {e}")
                failures.append((path, e))
                continue
            self.logger.info(f"Exported '{group.name}' \u2192 {path}")

        if failures:
            raise ExportWriteError(failures, serialized)
        return serialized

    # -- Import --

    def import_group(self, project_name: str, group: GroupInput, update: bool = False) -> WriteResult:
        """Create (POST) or, with ``update``, replace (PUT) a single group."""
        body = parse_group(group)
        name = body["name"]
        collection = collection_url(self.session, project_name)

        if update:
            existing = self.reader.find(project_name, name)
            if existing is None or existing.id is None:
                raise VariableGroupNotFoundError(project_name, name, url=collection)
            method, group_id = "PUT", existing.id
            url = f"{collection}/{group_id}?api-version={WRITE_API_VERSION}"
        else:
            method, group_id = "POST", None
            url = f"{collection}?api-version={WRITE_API_VERSION}"

        headers = dict(self.session.headers)
        headers["Content-Type"] = "application/json"
        response = self.transport.send(ApiRequest(method=method, url=url, headers=headers, body=body))

        if isinstance(response, dict) and response.get("id") is not None:
            group_id = response["id"]
        result = WriteResult(
            project=project_name,
            group_name=name,
            group_id=group_id,
            method=method,
            url=url,
            action="updated" if update else "created",
            response=response,
        )
        self._record(result)
        return result

    def import_groups(
        self, project_name: str, groups: Sequence[GroupInput], update: bool = False
    ) -> list[WriteResult]:
        """Import several groups in order; the first failure aborts the rest."""
        return [self.import_group(project_name, group, update=update) for group in groups]

    def import_files(
        self, project_name: str, paths: Sequence[Path | str], update: bool = False
    ) -> list[WriteResult]:
        """Import one group per JSON file, in the order given."""
        results = []
        for path in paths:
            results.append(self.import_group(project_name, self._read_file(path), update=update))
        return results

    @staticmethod
    def _read_file(path: Path | str) -> str:
        try:
            # utf-8-sig also accepts files written with a BOM
            return Path(path).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise GroupFileError(f"Cannot read {path}: {e}", path) from e

    def _record(self, result: WriteResult) -> None:
        # JSON mode renders the attached result instead of the message
        self.logger.info(
            f"\u2713 [{result.project}] {result.group_name}: {result.action} (id={result.group_id})",
            extra={"write_result": result},
        )
