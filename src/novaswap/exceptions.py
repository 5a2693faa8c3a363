class ContractAlreadyInstantiated(Exception):
    pass


class ContractNotInstantiated(Exception):
    pass


class InvalidAmount(Exception):
    pass


class MissingAssetAmount(Exception):
    pass


class NotContract(Exception):
    pass


class TxExecutionError(Exception):
    def __init__(self, code: int, raw_log: str = "", *args) -> None:
        self.code = code
        self.raw_log = raw_log
        super().__init__(f"Tx failed with code={code}: {raw_log}", *args)


class CodeUploadError(Exception):
    pass
