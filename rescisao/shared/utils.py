def format_brl(valor: float) -> str:
    """Formata no padrão brasileiro: 1234.5 -> 'R$ 1.234,50'."""
    sinal = "-" if valor < 0 else ""
    inteiro, centavos = divmod(int(round(abs(valor) * 100)), 100)
    s_int = f"{inteiro:,}".replace(",", ".")
    return f"{sinal}R$ {s_int},{centavos:02d}"
