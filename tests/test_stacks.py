import pytest

from algokit.stacks import ArrayStack, StackOverflowError, StackUnderflowError, TwoStacks


def test_array_stack_pops_in_reverse():
    s = ArrayStack(10)
    values = [10, 20, 30, 40, 50]
    for value in values:
        s.push(value)
    assert len(s) == 5
    assert s.top() == 50
    popped = []
    while len(s):
        popped.append(s.pop())
    assert popped == values[::-1]
    assert len(s) == 0


def test_array_stack_overflow():
    s = ArrayStack(2)
    s.push(1)
    s.push(2)
    with pytest.raises(StackOverflowError):
        s.push(3)
    assert len(s) == 2


def test_array_stack_underflow():
    s = ArrayStack(3)
    with pytest.raises(StackUnderflowError):
        s.pop()
    with pytest.raises(StackUnderflowError):
        s.top()


def test_invalid_size():
    with pytest.raises(ValueError):
        ArrayStack(0)
    with pytest.raises(ValueError):
        TwoStacks(-1)


def test_two_stacks_demo_sequence():
    s = TwoStacks(10)
    for value in (10, 20, 30):
        s.push1(value)
    s.push2(100)
    s.push2(90)
    for value in (40, 50, 60):
        s.push1(value)
    s.push2(80)
    s.push2(70)
    with pytest.raises(StackOverflowError):
        s.push2(120)
    assert s.pop1() == 60
    assert s.pop2() == 70
    assert s.top1() == 50
    assert s.top2() == 80


def test_two_stacks_are_independent():
    s = TwoStacks(4)
    s.push1(1)
    s.push2(2)
    assert s.pop1() == 1
    with pytest.raises(StackUnderflowError):
        s.top1()
    assert s.top2() == 2
    assert s.pop2() == 2
    with pytest.raises(StackUnderflowError):
        s.pop2()


def test_two_stacks_freed_slot_reusable():
    s = TwoStacks(2)
    s.push1(1)
    s.push2(2)
    with pytest.raises(StackOverflowError):
        s.push1(3)
    s.pop2()
    s.push1(3)
    assert s.top1() == 3