"""
Ejemplo Mínimo de grep-lite
===========================

PROPÓSITO:
    Mostrar el motor de contexto sin pasar por la línea de comandos.

QUÉ DEMUESTRA:
    1. build_matcher: literal o regex, resuelto una sola vez
    2. ContextEngine.run: un solo recorrido, ventanas de contexto fusionadas
    3. SEPARATOR: marca los huecos entre grupos no contiguos
    4. EngineStats: contadores del recorrido

CÓMO EJECUTAR:
    uv run python examples/minimal.py

OUTPUT ESPERADO:
    1:A
    2:x
    3:x
    4:B
    5:x
    6:x
    ---
    8:x
    9:x
    10:C
    Matches: 3 | Groups: 2 | Evicted: 1
"""

from grep_lite import ContextEngine, Line, build_matcher, render_record


def main() -> None:
    texts = ["A", "x", "x", "B", "x", "x", "x", "x", "x", "C"]
    engine = ContextEngine(build_matcher("A|B|C", regex=True), context_size=2)
    lines = (Line(index, text) for index, text in enumerate(texts))

    for record in engine.run(lines):
        print(render_record(record, line_numbers=True))

    stats = engine.stats
    print(f"Matches: {stats.matches} | Groups: {stats.groups} | Evicted: {stats.evicted}")


if __name__ == "__main__":
    main()
