"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, TYPE_CHECKING

from .cursor import Direction
from .modes import Action

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        self._move(editor, key_event)

    @abstractmethod
    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.active_document.move_cursor(Direction.LEFT)


class RightCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        document = editor.active_document
        line = document.get_current_row()
        # Stops on the last character; typing is what reaches one past it
        if line is not None and document.cursor.col < len(line):
            document.move_cursor(Direction.RIGHT)


class UpLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.active_document.move_cursor(Direction.UP)


class DownLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        document = editor.active_document
        if document.cursor.row < document.line_count:
            document.move_cursor(Direction.DOWN)


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        self._edit(editor, key_event)

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.active_document.remove_char()


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.active_document.new_line()


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.active_document.insert_char(key_event.value)


class SystemCommand(EditorCommand):
    """Base class for system commands like save and quit."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent'):
        self._execute_system(editor, key_event)

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.running = False


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.save_active()


class CommandRegistry:
    """Registry mapping state-machine actions to commands."""

    def __init__(self):
        self._commands: Dict[Action, EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register(Action.MOVE_LEFT, LeftCharCommand())
        self.register(Action.MOVE_RIGHT, RightCharCommand())
        self.register(Action.MOVE_UP, UpLineCommand())
        self.register(Action.MOVE_DOWN, DownLineCommand())

        # Editing commands
        self.register(Action.REMOVE_CHAR, BackspaceCommand())
        self.register(Action.NEW_LINE, InsertNewlineCommand())
        self.register(Action.INSERT_CHAR, InsertTextCommand())

        # System commands
        self.register(Action.EXIT, QuitCommand())
        self.register(Action.SAVE, SaveCommand())

    def register(self, action: Action, command: EditorCommand):
        """Register a command for an action."""
        self._commands[action] = command

    def get_command(self, action: Optional[Action]) -> Optional[EditorCommand]:
        """Get the command for an action, or None for no-op transitions."""
        if action is None:
            return None
        return self._commands.get(action)

    def execute(self, editor: 'Editor', action: Optional[Action], key_event: 'KeyEvent'):
        """Execute the command bound to action; unbound actions are no-ops."""
        command = self.get_command(action)
        if command is not None:
            command.execute(editor, key_event)
