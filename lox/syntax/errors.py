"""
Error types for the Lox expression tree.

Author: xwest
"""


class OperatorDecodeError(ValueError):
    """
    Raised (or returned) when operator text does not name a known operator.

    This is a contract violation between the scanner and whatever builds
    trees from its tokens, not a user-facing diagnostic.
    """

    def __init__(self, text: str, kind: str):
        super().__init__(f"Failed to decode [{text}] as a {kind} operator")
        self.text = text
        self.kind = kind
