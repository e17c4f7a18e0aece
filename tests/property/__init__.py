"""
Property-based тесты BigInt (Hypothesis).

Python int используется как эталон: каждое свойство проверяется на
случайных значениях, включая значения далеко за пределами int64.
"""
