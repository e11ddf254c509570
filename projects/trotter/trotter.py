"""trotter.py — Перестановки без рекурсии (Штейнгауз–Джонсон–Троттер, ускорение Ивена).

Permutations.of(n) создаёт итератор по всем перестановкам {0, 1, …, n-1}.
Каждый шаг — одна транспозиция соседних позиций, время шага O(n),
дополнительная память O(n). Итератор одноразовый: для повторного обхода
нужно создать новый.

Возможности:
  - Генерация всех n! перестановок в порядке SJT (не лексикографическом)
  - Обратная перестановка за O(n)
  - Последовательность «простых перемен» (plain changes) — позиции обменов
  - Чётность перестановки, проверка соседнего обмена
  - Сравнение скорости с itertools.permutations
"""
import sys
import json
import argparse
import itertools
from typing import Iterator

# ── состояния генератора ──────────────────────────────────────────────────────

NOT_STARTED = "NotStarted"
RUNNING = "Running"
EXHAUSTED = "Exhausted"


# ── вспомогательные функции ───────────────────────────────────────────────────

def is_permutation(perm: list[int]) -> bool:
    """True, если perm — перестановка {0, …, len(perm)-1}."""
    n = len(perm)
    seen = [False] * n
    for v in perm:
        if not isinstance(v, int) or not 0 <= v < n or seen[v]:
            return False
        seen[v] = True
    return True


def inverse_perm(perm: list[int], check: bool = False) -> list[int]:
    """Обратная перестановка: rev_perm[perm[i]] = i. Время O(n).

    Вход не изменяется. При check=True вход проверяется, и для
    не-перестановки бросается ValueError; без проверки результат
    для такого входа не определён.
    """
    if check and not is_permutation(perm):
        raise ValueError(f"perm должна быть перестановкой {{0..{len(perm) - 1}}}, получено {perm}")
    rev_perm = list(perm)
    for i, v in enumerate(perm):
        rev_perm[v] = i
    return rev_perm


def adjacent_swap(a: list[int], b: list[int]) -> int | None:
    """Позиция i, если b получается из a обменом a[i] и a[i+1], иначе None."""
    if len(a) != len(b):
        return None
    diff = [i for i in range(len(a)) if a[i] != b[i]]
    if len(diff) != 2 or diff[1] != diff[0] + 1:
        return None
    i = diff[0]
    if a[i] == b[i + 1] and a[i + 1] == b[i]:
        return i
    return None


def parity(perm: list[int]) -> int:
    """Знак перестановки: +1 для чётной, -1 для нечётной (через циклы)."""
    n = len(perm)
    visited = [False] * n
    cycles = 0
    for start in range(n):
        if not visited[start]:
            cycles += 1
            cur = start
            while not visited[cur]:
                visited[cur] = True
                cur = perm[cur]
    return 1 if (n - cycles) % 2 == 0 else -1


# ── основной класс ────────────────────────────────────────────────────────────

class Permutations:
    """Одноразовый итератор по перестановкам {0, …, n-1} в порядке SJT.

    Состояние: перестановка perm (perm[позиция] = значение) и вектор
    направлений direction той же длины, индексируемый позицией.
    direction[pos] ∈ {-1, 0, +1} — куда движется значение, стоящее в pos;
    0 — значение «осело» и не подвижно. При перемещении значения оба
    вектора меняются местами одновременно.
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValueError(f"n должно быть ≥ 1, получено {n}")
        self.n = n
        self._perm = [0] * n
        self._direction = [0] * n
        self._is_initiated = False
        self._is_finished = False

    @classmethod
    def of(cls, n: int) -> "Permutations":
        return cls(n)

    def get_n(self) -> int:
        return self.n

    def size(self) -> int:
        return self.n

    @property
    def state(self) -> str:
        if not self._is_initiated:
            return NOT_STARTED
        if self._is_finished:
            return EXHAUSTED
        return RUNNING

    def __repr__(self):
        return f"Permutations(n={self.n}, state={self.state})"

    # ── итерация ──────────────────────────────────────────────────────────────

    def __iter__(self):
        return self

    def __next__(self) -> list[int]:
        perm = self.advance()
        if perm is None:
            raise StopIteration
        return perm

    def advance(self) -> list[int] | None:
        """Следующая перестановка (копия) или None, если перестановки кончились.

        После первого None все последующие вызовы тоже возвращают None
        и состояние не меняют.
        """
        if not self._is_initiated:
            return self._start()
        if self._is_finished:
            return None
        return self._step()

    def _start(self) -> list[int]:
        # Тождественная перестановка; все значения, кроме стоящего
        # в позиции 0, смотрят влево. Позиция 0 стартует осевшей.
        for i in range(self.n):
            self._perm[i] = i
            self._direction[i] = -1
        self._direction[0] = 0
        self._is_initiated = True
        return list(self._perm)

    def _step(self) -> list[int] | None:
        perm, direction = self._perm, self._direction
        rev_perm = inverse_perm(perm)

        # 1. Наибольшее подвижное значение m
        m = -1
        for v in range(self.n - 1, -1, -1):
            if direction[rev_perm[v]] != 0:
                m = v
                break
        if m < 0:
            self._is_finished = True
            return None

        # 2. Сдвинуть m на одну позицию вместе с его направлением
        pos = rev_perm[m]
        d = direction[pos]
        new_pos = pos + d
        perm[pos], perm[new_pos] = perm[new_pos], perm[pos]
        direction[pos], direction[new_pos] = direction[new_pos], direction[pos]

        # 3. m оседает у края или перед бо́льшим соседом
        if (new_pos == 0 or new_pos == self.n - 1
                or perm[new_pos + d] > m):
            direction[new_pos] = 0

        # 4. Все значения больше m снова подвижны и смотрят на m
        for p, v in enumerate(perm):
            if v > m:
                direction[p] = 1 if p < new_pos else -1

        return list(perm)


# ── производные последовательности ────────────────────────────────────────────

def transpositions(n: int) -> Iterator[int]:
    """«Простые перемены»: позиция i каждого обмена (i, i+1), n! - 1 штук."""
    it = Permutations(n)
    prev = it.advance()
    for perm in it:
        yield adjacent_swap(prev, perm)
        prev = perm


# ── бенчмарк ──────────────────────────────────────────────────────────────────

def benchmark(n: int) -> str:
    """Сравнить скорость генерации с itertools.permutations."""
    import time

    t0 = time.perf_counter()
    cnt_own = sum(1 for _ in Permutations(n))
    t1 = time.perf_counter()
    cnt_iter = sum(1 for _ in itertools.permutations(range(n)))
    t2 = time.perf_counter()

    own_ms = (t1 - t0) * 1000
    iter_ms = (t2 - t1) * 1000
    return (f"n={n}, {cnt_own}={cnt_iter} перестановок\n"
            f"  trotter:   {own_ms:.2f} мс\n"
            f"  itertools: {iter_ms:.2f} мс")


# ── CLI ───────────────────────────────────────────────────────────────────────

def _parse_perm(text: str) -> list[int]:
    try:
        return [int(x) for x in text.split(",")]
    except ValueError:
        raise ValueError(f"ожидается список чисел через запятую, получено {text!r}") from None


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="trotter — перестановки {0..n-1} (Штейнгауз–Джонсон–Троттер)")
    parser.add_argument("--all", type=int, metavar="N",
                        help="Вывести все перестановки {0..N-1}")
    parser.add_argument("--take", type=int, metavar="K",
                        help="Вывести первые K перестановок {0..N-1} (N задаётся --n)")
    parser.add_argument("--n", type=int, metavar="N", default=5,
                        help="Размер перестановки для --take (по умолчанию 5)")
    parser.add_argument("--inverse", type=str, metavar="PERM",
                        help="Обратная перестановка (через запятую, напр. 2,0,1)")
    parser.add_argument("--swaps", type=int, metavar="N",
                        help="Позиции обменов («простые перемены») для {0..N-1}")
    parser.add_argument("--benchmark", type=int, metavar="N",
                        help="Бенчмарк для n=N")
    parser.add_argument("--json", action="store_true",
                        help="JSON-вывод")
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(argv)

    try:
        _run(args)
    except ValueError as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        sys.exit(1)

    if not argv:
        parser.print_help()


def _run(args):
    if args.all is not None:
        perms = list(Permutations(args.all))
        if args.json:
            print(json.dumps({"n": args.all, "count": len(perms), "perms": perms},
                             ensure_ascii=False, indent=2))
        else:
            for i, p in enumerate(perms):
                print(f"  {i:6d}: {p}")

    if args.take is not None:
        perms = list(itertools.islice(Permutations(args.n), args.take))
        if args.json:
            print(json.dumps({"n": args.n, "take": args.take, "perms": perms},
                             ensure_ascii=False, indent=2))
        else:
            print(f"Первые {len(perms)} перестановок {{0..{args.n - 1}}}:")
            for i, p in enumerate(perms):
                print(f"  {i:6d}: {p}")

    if args.inverse is not None:
        perm = _parse_perm(args.inverse)
        inv = inverse_perm(perm, check=True)
        if args.json:
            print(json.dumps({"perm": perm, "inverse": inv}, ensure_ascii=False, indent=2))
        else:
            print(f"inverse({perm}) = {inv}")

    if args.swaps is not None:
        swaps = list(transpositions(args.swaps))
        if args.json:
            print(json.dumps({"n": args.swaps, "swaps": swaps}, ensure_ascii=False, indent=2))
        else:
            print(f"Обмены для n={args.swaps}: {len(swaps)}")
            print("  " + " ".join(str(s) for s in swaps))

    if args.benchmark is not None:
        print(benchmark(args.benchmark))


if __name__ == "__main__":
    main()
