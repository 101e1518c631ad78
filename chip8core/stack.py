"""CHIP-8 stack operations."""

import jax.numpy as jnp

from chip8core.constants import STACK_SIZE
from chip8core.errors import StackOverflowError, StackUnderflowError
from chip8core.state import StackState


def push(stack: StackState, address: int) -> StackState:
    """Push a return address onto the stack."""
    if stack.pointer >= STACK_SIZE:
        raise StackOverflowError(STACK_SIZE)
    new_data = stack.data.at[stack.pointer].set(jnp.uint16(address & 0xFFFF))
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, int]:
    """Pop the most recent return address."""
    if stack.pointer == 0:
        raise StackUnderflowError()
    new_pointer = stack.pointer - 1
    popped_address = int(stack.data[new_pointer])
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
