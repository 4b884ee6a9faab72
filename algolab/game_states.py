"""A bounded stack of game states with an interactive menu."""

from __future__ import annotations

from typing import Optional, Sequence

MAX_STATES = 100


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(Exception):
    """Raised when popping from an empty stack."""


class StateStack:
    """A stack of named game states with a fixed capacity."""

    def __init__(self, capacity: int = MAX_STATES) -> None:
        self.capacity = capacity
        self._states: list[str] = []

    def push(self, name: str) -> None:
        """Enter a new state."""
        if self.is_full():
            raise StackFullError("pilha cheia")
        self._states.append(name)

    def pop(self) -> str:
        """Leave the current state and return its name."""
        if self.is_empty():
            raise StackEmptyError("pilha vazia")
        return self._states.pop()

    def current(self) -> Optional[str]:
        """Return the current state, or None while simply playing."""
        return self._states[-1] if self._states else None

    def is_empty(self) -> bool:
        return not self._states

    def is_full(self) -> bool:
        return len(self._states) >= self.capacity

    def __len__(self) -> int:
        return len(self._states)


def _show_current(stack: StateStack) -> None:
    state = stack.current()
    if state is None:
        print("\n\tJogando")
    else:
        print(f"\n\tEstado atual: {state}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    stack = StateStack()
    while True:
        print("\nEscolha uma opção:")
        print("1 - Empilhar novo estado")
        print("2 - Desempilhar estado atual")
        print("0 - Sair")
        try:
            choice = input("Opção: ").strip()
        except EOFError:
            return 0

        if choice == "1":
            try:
                name = input("Digite o nome do novo estado: ")
            except EOFError:
                return 0
            try:
                stack.push(name)
            except StackFullError:
                print("\n\tErro: pilha cheia!")
            else:
                print(f"\n\tEntrou no estado: {name}")
            _show_current(stack)
        elif choice == "2":
            try:
                name = stack.pop()
            except StackEmptyError:
                print("\n\tErro: pilha vazia!")
            else:
                print(f"\n\tSaindo do estado: {name}", end="")
            _show_current(stack)
        elif choice == "0":
            print("Encerrando programa.")
            return 0
        else:
            print("Opção inválida!")


if __name__ == "__main__":
    raise SystemExit(main())