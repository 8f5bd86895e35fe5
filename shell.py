"""
Line-oriented command shell over a NamespaceFileSystem.

The shell owns the current directory; the filesystem never does. Each line
is split on whitespace into a command name and its arguments, dispatched to
one filesystem operation, and the resulting status line is returned so the
caller decides how to print it.
"""

import logging

from fserrors import CommandError
from namespacefs import ROOT_MARKER
from shellconfig import ShellConfig

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
COMMAND_NOT_FOUND = "command not found"
HELP_PHRASES = ("コマンドリスト", "コマンド リスト")

HELP_TEXT = "\n".join([
    "available commands:",
    " touch <name>         - create a file",
    " ls [-l]              - list directory contents",
    " rm <name>            - remove a file",
    " mv <old> <new>       - rename a file",
    " chmod <mode> <file>  - change a file's permission tag",
    " mkdir <name>         - create a directory",
    " cd <dir>             - change directory (/, .., . supported)",
    " pwd / pwt            - print the current path",
    " exit                 - quit",
])


class Shell:
    def __init__(self, fs, config=None):
        self.fs = fs
        self.config = config or ShellConfig()
        self.cwd = fs.root
        self.running = False

        self.commands = {
            "touch": self._touch,
            "ls": self._ls,
            "rm": self._rm,
            "mv": self._mv,
            "chmod": self._chmod,
            "mkdir": self._mkdir,
            "cd": self._cd,
            "pwd": self._pwd,
            "pwt": self._pwd,
            "help": self._help,
        }

    def prompt(self):
        if self.cwd is self.fs.root:
            return f"{self.config.prompt_host}:{ROOT_MARKER}> "
        return f"{self.config.prompt_host}:{self.cwd.name}/> "

    def execute(self, line: str) -> str:
        stripped = line.strip()
        if stripped in HELP_PHRASES:
            return HELP_TEXT

        parts = stripped.split()
        if not parts:
            return ""
        command, args = parts[0], parts[1:]

        handler = self.commands.get(command)
        if handler is None:
            logger.debug(f"unknown command: {command}")
            return COMMAND_NOT_FOUND

        try:
            return handler(args)
        except CommandError as e:
            logger.debug(f"{command} rejected: {e}")
            return str(e)

    def _touch(self, args):
        return self.fs.make_file(self.cwd, args)

    def _ls(self, args):
        return self.fs.list_directory(self.cwd, args)

    def _rm(self, args):
        return self.fs.remove_file(self.cwd, args)

    def _mv(self, args):
        return self.fs.rename_file(self.cwd, args)

    def _chmod(self, args):
        return self.fs.change_mode(self.cwd, args)

    def _mkdir(self, args):
        return self.fs.make_directory(self.cwd, args)

    def _cd(self, args):
        self.cwd = self.fs.change_directory(self.cwd, args)
        return ""

    def _pwd(self, args):
        return self.fs.print_working_directory(self.cwd)

    def _help(self, args):
        return HELP_TEXT

    def start(self):
        self.running = True
        try:
            while self.running:
                try:
                    line = input(self.prompt())
                except EOFError:
                    print(f"\n{EXIT_COMMAND}")
                    break

                if line.split()[:1] == [EXIT_COMMAND]:
                    break

                output = self.execute(line)
                if output:
                    print(output)
        finally:
            self.running = False
            self.cwd = None
            self.fs.teardown()
