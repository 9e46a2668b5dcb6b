from __future__ import annotations


class GenerateError(Exception):
    pass


class InvalidModuleName(GenerateError):
    pass


class UnknownPlatform(GenerateError):
    pass


class TemplateNotFound(GenerateError):
    pass


class FileAlreadyExists(GenerateError):
    pass


class UnableToCreateFile(GenerateError):
    pass
