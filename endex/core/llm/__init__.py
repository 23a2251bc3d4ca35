"""Chat-completion integration layer.

Kept deliberately thin:
- One outgoing request per lookup, no retries and no cached answers.
- Configured explicitly from settings; request code never reads the environment.
- Prompts, answers and the bearer credential are never logged.
"""
