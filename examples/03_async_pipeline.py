"""03 — Async extraction then analysis.

Extracts the text of a PDF, then asks for suggestions on it, the same
two-step flow the upload page runs.
"""

import asyncio
import base64
import sys
from pathlib import Path

from postlift import AsyncClient, ServiceError


async def main(path: str) -> None:
    client = AsyncClient()
    pdf_b64 = base64.b64encode(Path(path).read_bytes()).decode()

    try:
        text = await client.extract_text_from_pdf(pdf_b64)
        print("=== Extracted text ===")
        print(text, "\n")

        print("=== Suggestions ===")
        print(await client.analyze_social_media_content(text))
    except ServiceError as exc:
        print(f"Error: {exc}", file=sys.stderr)


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "post.pdf"))
