"""
Core arithmetic engine: digit-level primitives, decimal text I/O,
the BigInt value type and its JSON contract.

Модули не зависят от внешних систем и не имеют глобального состояния.
"""
