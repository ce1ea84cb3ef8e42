#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/exceptions.py
"""Exceptions raised by mdtree.

Event reconstruction and Markdown rendering never fail on unexpected event
shapes; they degrade to conservative fallbacks instead. The exceptions below
cover the remaining error conditions: invalid arguments and options, and a
missing optional tokenizer dependency.

Exception Hierarchy
-------------------
- MdTreeError

  - ValidationError (bad constructor arguments, e.g. a heading level of 7)
    - InvalidOptionsError (options object of the wrong class)

  - DependencyError (mistune missing or too old)

"""

from typing import Any


class MdTreeError(Exception):
    """Root of the mdtree exception hierarchy.

    Parameters
    ----------
    message : str
        Human-readable description
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdTreeError):
    """A node, builder or options argument has an invalid value.

    Parameters
    ----------
    message : str
        Description of the problem
    parameter_name : str, optional
        Name of the offending argument
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A tokenizer or renderer received options meant for another component.

    Parameters
    ----------
    component_name : str
        Component that rejected the options (e.g. "markdown")
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object actually passed
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"Invalid options type for '{component_name}': "
                f"expected {expected_type.__name__}, got {received_type.__name__}"
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


def _quoted(name: str, spec: str) -> str:
    return f"'{name}{spec}'" if spec else f"'{name}'"


def _install_arg(name: str, spec: str) -> str:
    return f'"{name}{spec}"' if spec else name


class DependencyError(MdTreeError):
    """An optional package needed by a component is missing or too old.

    The generated message lists every problem and ends with a ready-to-run
    ``pip install --upgrade`` line.

    Parameters
    ----------
    component_name : str
        Component needing the packages
    missing_packages : list of (name, version_spec)
        Packages that could not be imported
    version_mismatches : list of (name, required, installed), optional
        Packages installed in an unsupported version
    message : str, optional
        Overrides the generated message
    original_import_error : ImportError, optional
        First ImportError seen while checking

    """

    def __init__(
        self,
        component_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        version_mismatches = version_mismatches or []
        if message is None:
            lines = []
            if missing_packages:
                listed = ", ".join(_quoted(name, spec) for name, spec in missing_packages)
                lines.append(f"{component_name} requires the following packages: {listed}")
            if version_mismatches:
                listed = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                lines.append(f"{component_name} has version mismatches: {listed}")

            to_install = missing_packages + [(name, required) for name, required, _ in version_mismatches]
            if to_install:
                lines.append("Install with: pip install --upgrade " + " ".join(_install_arg(*p) for p in to_install))
            message = "\n".join(lines)

        super().__init__(message, original_error=original_import_error)
        self.component_name = component_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error
