"""Integer functions: bit counts, factorials, Fibonacci numbers, gcd and primality."""

from functools import lru_cache
from math import isqrt

DEFAULT_SIEVE_LIMIT = 1_000_000


def count_set_bits(n: int) -> int:
    """Return the number of set bits in ``n`` by clearing the lowest one each step.

    Values that are not positive have no bits counted and give 0.
    """
    count = 0
    while n > 0:
        n &= n - 1
        count += 1
    return count


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` stairs taking 1 or 2 at a time."""
    if n < 1:
        raise ValueError("the number of stairs must be greater than 0")
    if n == 1:
        return 1
    previous, current = 1, 2
    for _ in range(2, n):
        previous, current = current, previous + current
    return current


def factorial(n: int) -> int:
    """Return ``n!`` computed recursively."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def factorial_iterative(n: int) -> int:
    """Return ``n!`` computed with a loop; any ``n`` below 2 gives 1."""
    result = 1
    for i in range(n, 1, -1):
        result *= i
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion."""
    if n < 0:
        raise ValueError("Fibonacci numbers are not defined for negative indices")
    if n in (0, 1):
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_top_down(n: int) -> int:
    """Return the ``n``-th Fibonacci number by memoised recursion."""
    if n < 0:
        raise ValueError("Fibonacci numbers are not defined for negative indices")
    memo: dict[int, int] = {0: 0, 1: 1}

    def _fib(k: int) -> int:
        if k not in memo:
            memo[k] = _fib(k - 1) + _fib(k - 2)
        return memo[k]

    return _fib(n)


def fibonacci_bottom_up(n: int) -> int:
    """Return the ``n``-th Fibonacci number by building up from the base cases."""
    if n < 0:
        raise ValueError("Fibonacci numbers are not defined for negative indices")
    table = [0, 1]
    for i in range(2, n + 1):
        table.append(table[i - 1] + table[i - 2])
    return table[n]


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's method."""
    while b != 0:
        a, b = b, a % b
    return a


class PrimeSieve:
    """Sieve of Eratosthenes up to ``limit``, with trial division beyond it."""

    def __init__(self, limit: int = DEFAULT_SIEVE_LIMIT) -> None:
        if limit < 0:
            raise ValueError("sieve limit must be non-negative")
        self.limit = limit
        flags = bytearray(b"\x01") * (limit + 1)
        flags[: min(2, limit + 1)] = bytes(min(2, limit + 1))
        for i in range(2, isqrt(limit) + 1):
            if flags[i]:
                start = i * i
                flags[start::i] = bytes(len(range(start, limit + 1, i)))
        self._flags = flags
        self.primes = [i for i, flag in enumerate(flags) if flag]

    def is_prime(self, number: int) -> bool:
        """Return whether ``number`` is prime."""
        if number < 2:
            return False
        if number <= self.limit:
            return bool(self._flags[number])
        for p in self.primes:
            if p * p > number:
                return True
            if number % p == 0:
                return False
        divisor = max(self.limit + 1, 2)
        while divisor * divisor <= number:
            if number % divisor == 0:
                return False
            divisor += 1
        return True


@lru_cache(maxsize=1)
def _default_sieve() -> PrimeSieve:
    return PrimeSieve(DEFAULT_SIEVE_LIMIT)


def is_prime(number: int) -> bool:
    """Return whether ``number`` is prime, using a shared sieve up to one million."""
    return _default_sieve().is_prime(number)