"""Selection query adapter.

One adapter per editor session: it reads that editor's selection and
routes questions about it through the session controller.
"""

from ..collaborators import HostEditor
from .controller import ChatSessionController
from .models import Exchange


class SelectionQueryAdapter:
    """Ask the assistant about the code highlighted in one editor."""

    def __init__(self, controller: ChatSessionController, editor: HostEditor) -> None:
        self._controller = controller
        self._editor = editor

    @property
    def editor(self) -> HostEditor:
        return self._editor

    def is_active(self) -> bool:
        """Whether the selection widget should be shown (non-blank selection)."""
        return bool(self._editor.get_selected_text().strip())

    async def ask(self, question: str) -> Exchange | None:
        """Ask ``question`` about the current selection.

        A no-op when the selection or the question is empty.
        """
        selected = self._editor.get_selected_text()
        if not selected or not question.strip():
            return None
        return await self._controller.ask_about_selection(selected, question)
