"""The chain of path segments a request still has to consume."""
from collections import deque


class UrlChain(object):
    """Ordered tokens of a request path, consumed from the front.

    Tokens start as path segment strings, relationships push back
    identifiers they resolved, which can be of any type.

    """
    __slots__ = ('_tokens',)

    def __init__(self, tokens=()):
        self._tokens = deque(tokens)

    @classmethod
    def from_path(cls, path):
        """Build a chain from an url path, empty segments are dropped."""
        return cls(segment for segment in path.split('/') if segment)

    def shift(self):
        """Remove and return the first token, ``None`` when the chain is empty."""
        try:
            return self._tokens.popleft()
        except IndexError:
            return None

    def unshift(self, token):
        self._tokens.appendleft(token)

    def peek(self):
        """The first token without consuming it."""
        try:
            return self._tokens[0]
        except IndexError:
            return None

    def __len__(self):
        return len(self._tokens)

    def __repr__(self):
        return '<UrlChain %r>' % list(self._tokens)
