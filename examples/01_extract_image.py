"""01 — Extract text from an image.

Reads an image from disk, sends it for extraction and prints the result.
Requires POSTLIFT_APP_ID in the environment.
"""

import sys

from postlift import Client, ServiceError

path = sys.argv[1] if len(sys.argv) > 1 else "flyer.png"

client = Client()
try:
    print(client.extract_text_from_file(path))
except ServiceError as exc:
    print(f"Error: {exc}", file=sys.stderr)
