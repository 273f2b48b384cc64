"""Prompt Gateway - blocking line input from stdin."""

from create_next_elysia.domain.protocols import PromptProtocol


class PromptGateway(PromptProtocol):
    """Reads answers with input(). A closed stdin counts as an empty answer."""

    def ask(self, question: str) -> str:
        try:
            return input(question)
        except EOFError:
            return ""
