"""Source Mirror — live mirror of a C/C++ source folder over HTTP.

Watches the working directory for C/C++ source files and streams their
contents and changes to a remote endpoint so a remote consumer keeps an
up-to-date copy of the project's sources.
"""

__version__ = "1.0.0"
__app_name__ = "Source Mirror"
