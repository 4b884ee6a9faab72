import io

import pytest

from algolab.game_states import (
    MAX_STATES,
    StackEmptyError,
    StackFullError,
    StateStack,
    main,
)


def test_push_pop_is_lifo():
    stack = StateStack()
    for name in ("Menu", "Inventario", "Pausa"):
        stack.push(name)
    assert stack.pop() == "Pausa"
    assert stack.pop() == "Inventario"
    assert stack.current() == "Menu"


def test_new_stack_is_empty():
    stack = StateStack()
    assert stack.is_empty() is True
    assert stack.current() is None


def test_pop_empty_raises():
    with pytest.raises(StackEmptyError):
        StateStack().pop()


def test_capacity_limit():
    stack = StateStack()
    for index in range(MAX_STATES):
        stack.push(f"s{index}")
    assert stack.is_full() is True
    assert len(stack) == MAX_STATES
    with pytest.raises(StackFullError):
        stack.push("extra")
    assert stack.current() == f"s{MAX_STATES - 1}"


def test_custom_capacity():
    stack = StateStack(capacity=1)
    stack.push("a")
    with pytest.raises(StackFullError):
        stack.push("b")


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nMenu\n2\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Entrou no estado: Menu" in out
    assert "Estado atual: Menu" in out
    assert "Saindo do estado: Menu" in out
    assert "Jogando" in out
    assert "Encerrando programa." in out


def test_main_pop_empty_and_invalid(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n9\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Erro: pilha vazia!" in out
    assert "Opção inválida!" in out


def test_main_ends_on_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nLoja\n"))
    assert main([]) == 0
    assert "Entrou no estado: Loja" in capsys.readouterr().out