"""Contains the name for the logger of InterpKit modules.

``interpkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Sizes and dtypes of the tableaux and fits being built.
* ``WARNING``: An indication that something unexpected
    happened which may require attention (e.g. non-finite samples).

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``interpkit.logger.interpkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "interpkit"
interpkit_logger = logging.getLogger(logger_name)
