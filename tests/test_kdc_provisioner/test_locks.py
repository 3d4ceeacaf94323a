"""Test per principal locks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import asyncio

import pytest

from kdc_provisioner.locks import PrincipalLockRegistry


@pytest.mark.asyncio
async def test_same_principal_serialized() -> None:
    """Test holders of one principal run one after another."""
    locks = PrincipalLockRegistry()
    events: list[str] = []

    async def hold(tag: str) -> None:
        async with locks.hold("a@x.edu"):
            events.append(f"{tag} in")
            await asyncio.sleep(0)
            events.append(f"{tag} out")

    await asyncio.gather(hold("first"), hold("second"))

    assert events == ["first in", "first out", "second in", "second out"]
    assert len(locks) == 0


@pytest.mark.asyncio
async def test_other_principals_not_blocked() -> None:
    """Test different principals do not wait for each other."""
    locks = PrincipalLockRegistry()

    async with locks.hold("a@x.edu"):
        async with asyncio.timeout(1):
            async with locks.hold("b@x.edu"):
                assert len(locks) == 2

    assert len(locks) == 0


@pytest.mark.asyncio
async def test_released_on_error() -> None:
    """Test lock is released when the holder raises."""
    locks = PrincipalLockRegistry()

    with pytest.raises(RuntimeError):
        async with locks.hold("a@x.edu"):
            raise RuntimeError

    assert len(locks) == 0
