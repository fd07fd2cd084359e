def format_cop(value):
    """Format an amount as Colombian pesos, e.g. 30000 -> '$ 30.000'."""
    return '$ ' + f'{int(value):,}'.replace(',', '.')
