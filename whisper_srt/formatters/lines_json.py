"""JSON formatter: the re-segmented lines as a machine-readable document.

WHY: Downstream tools (translation, dubbing, QA scripts) want the new line
boundaries with numeric times, not SRT text they would have to re-parse.

HOW: Builds {"lines": [{index, start, end, text}, ...]} with times in
seconds (already rounded to 10 ms), validates it against LINES_SCHEMA with
jsonschema, then serialises with ensure_ascii=False so CJK text stays
readable.

RULES:
- Output is validated before it is returned; a schema failure raises
  jsonschema.ValidationError (a bug, never user input).
- Indices start at 1; text is never empty.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

import jsonschema

from whisper_srt.core.ir import Line
from whisper_srt.formatters.base import BaseFormatter, FormatterOutput

LINES_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["lines"],
    "additionalProperties": False,
    "properties": {
        "lines": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["index", "start", "end", "text"],
                "additionalProperties": False,
                "properties": {
                    "index": {"type": "integer", "minimum": 1},
                    "start": {"type": "number", "minimum": 0},
                    "end": {"type": "number", "minimum": 0},
                    "text": {"type": "string", "minLength": 1},
                },
            },
        },
    },
}


class LinesJSONFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Lines JSON"

    def format(self, lines: Sequence[Line]) -> List[FormatterOutput]:
        """Serialise lines to JSON after schema validation.

        Raises:
            jsonschema.ValidationError: If the document does not match
                LINES_SCHEMA.
        """
        document = {
            "lines": [
                {
                    "index": line.index,
                    "start": line.start,
                    "end": line.end,
                    "text": line.text,
                }
                for line in lines
            ]
        }
        jsonschema.validate(instance=document, schema=LINES_SCHEMA)

        return [
            FormatterOutput(
                suffix=".lines.json",
                content=json.dumps(document, ensure_ascii=False, indent=2) + "\n",
                media_type="application/json",
            )
        ]
