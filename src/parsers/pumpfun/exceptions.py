class PumpfunError(Exception):
    pass


class GlobalAccountDecodeError(PumpfunError):
    pass


class InitialBuyOverflowError(PumpfunError, ArithmeticError):
    pass
