"""
 Minimal stand-in for the GitHub Actions toolkit: inputs come from INPUT_* env vars, debug and
 error lines are workflow commands on stdout, outputs go to the GITHUB_OUTPUT file.
"""

import os
import sys
import uuid
from typing import Optional, TextIO

from . import input_env_name
from ..model import InputError

TRUE_VALUES = ["true", "True", "TRUE"]
FALSE_VALUES = ["false", "False", "FALSE"]


def escape_data(value: str):
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str):
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class ActionsCore:
    def __init__(self, environ=None, stream: Optional[TextIO] = None):
        self.environ = os.environ if environ is None else environ
        self.stream = stream
        self.exit_code = 0

    def _print(self, line: str):
        print(line, file=sys.stdout if self.stream is None else self.stream)

    def get_input(self, name: str, required: bool = False) -> str:
        value = self.environ.get(input_env_name(name), "").strip()
        if required and not value:
            raise InputError("Input required and not supplied: %s" % name)
        return value

    def get_boolean_input(self, name: str, default: bool) -> bool:
        value = self.get_input(name)
        if not value:
            return default
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        raise InputError(
            "Input does not meet YAML 1.2 \"Core Schema\" specification: %s\n"
            "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
            % name
        )

    def debug(self, message: str):
        self._print("::debug::%s" % escape_data(message))

    def info(self, message: str):
        self._print(message)

    def set_output(self, name: str, value: str):
        output_file = self.environ.get("GITHUB_OUTPUT")
        if not output_file:
            self._print("::set-output name=%s::%s" % (escape_property(name), escape_data(value)))
            return

        delimiter = "ghadelimiter_%s" % uuid.uuid4()
        with open(output_file, "a", encoding="utf-8") as f:
            f.write("%s<<%s\n%s\n%s\n" % (name, delimiter, value, delimiter))

    def set_failed(self, message: str):
        self.exit_code = 1
        self._print("::error::%s" % escape_data(message))
