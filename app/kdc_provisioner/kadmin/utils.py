"""Utils for kadmin sessions."""

from functools import wraps
from typing import Any, Callable

import httpx
from loguru import logger as loguru_logger

from kdc_provisioner.exceptions import KdcOperationError, KdcProvisionerError

log = loguru_logger.bind(name="kdc_provisioner")

log.add(
    "logs/kdc_provisioner_{time:DD-MM-YYYY}.log",
    filter=lambda rec: rec["extra"].get("name") == "kdc_provisioner",
    retention="10 days",
    rotation="1d",
    colorize=False,
)


def logger_wraps(
    error: type[KdcProvisionerError] = KdcOperationError,
) -> Callable:
    """Log kadmin calls.

    :param type[KdcProvisionerError] error: raised instead of transport
        errors, defaults to KdcOperationError
    :return Callable: any method
    """

    def wrapper(func: Callable) -> Callable:
        name = func.__name__

        @wraps(func)
        async def wrapped(*args: Any, **kwargs: Any) -> Any:
            logger = log.opt(depth=1)
            try:
                principal = args[1]
            except IndexError:
                principal = kwargs.get("name", "")

            logger.info(f"Calling '{name}' for {principal}")
            try:
                result = await func(*args, **kwargs)
            except httpx.HTTPError as err:
                logger.critical(f"Can not access kadmin server: {err!r}")
                raise error(f"{name} {principal}: {err!r}") from err

            except KdcProvisionerError as err:
                logger.error(f"{name} call raised: {err}")
                raise

            else:
                logger.success(f"Executed {name}")
            return result

        return wrapped

    return wrapper
