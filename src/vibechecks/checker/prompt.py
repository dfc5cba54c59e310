"""Prompt construction for the reviewing model."""

from __future__ import annotations

_PROMPT_TEMPLATE = """You are a code review assistant. Only provide feedback based strictly on the instructions provided below. Do not invent or assume any rules that are not explicitly present in these instructions. You will be given a git diff of a file, or the full contents of the file. If a rule is not relevant for the language of the file, ignore it.

INSTRUCTIONS
```
{instructions}
```

FILENAME: {filename}
LANGUAGE: {language}

GIT DIFF or FILE CONTENTS:
```
{source}
```

Your task:
- Analyze the git diff or file content against ONLY the provided instructions.
- If there are no relevant instructions for the changes, respond with a passing result and do not provide additional feedback.
- If there are issues, output errors and warnings as objects, each with the following fields:
  - line: the line number (1-based) if available, or null if not applicable
  - message: a clear, concise message describing the issue
- Do NOT include the file name in your output. The diff is always for a single file.
- Always include the line number if available. Format your feedback as a linter would.
- Do not include any text outside the JSON object in your response.

Respond with a single RFC 8259 compatible JSON object in the following format (and nothing else):
{{
  "passed": boolean, // true if all changes comply with the instructions
  "errors": [
    {{ "line": number | null, "message": string }},
    ...
  ], // List errors that directly violate the instructions
  "warnings": [
    {{ "line": number | null, "message": string }},
    ...
  ], // List warnings for possible improvements per instructions
  "summary": "Brief summary of the analysis, or state that all changes comply if so."
}}

Focus on:
1. Code quality and style adherence as described in the instructions
2. Potential bugs or issues only if covered by the instructions
3. Compliance with project-specific rules from the instructions
4. Security or performance concerns only if mentioned in the instructions

If a rule is not present in the instructions, do not comment on it. Do not include any explanation or text outside the JSON object.
MAKE SURE YOUR RESPONSE IS A VALID RFC 8259 COMPATIBLE JSON OBJECT. If you output anything else, you will have failed the task."""


def build_prompt(instructions: str, source: str, filename: str, language: str) -> str:
    """Render the review prompt for one file."""
    return _PROMPT_TEMPLATE.format(
        instructions=instructions,
        source=source,
        filename=filename,
        language=language,
    )


def source_with_line_numbers(source: str) -> str:
    """Prefix each line with its 1-based line number."""
    return "\n".join(f"{index} {line}" for index, line in enumerate(source.split("\n"), start=1))
