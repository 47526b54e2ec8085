"""02 — Streamed engagement suggestions.

Prints suggestion text as each delta arrives instead of waiting for the
complete answer.
"""

from postlift import Client, Operation

POST = "We just opened our second bakery downtown. Come by this weekend for free samples."

client = Client()
for delta in client.stream(Operation.ANALYZE_TEXT, text=POST):
    print(delta, end="", flush=True)
print()
