from .signer import (
    RemoteSigner,
    Transaction,
    TransactionBody,
    FunctionCall,
    decode_function_call,
)

__all__ = [
    "RemoteSigner",
    "Transaction",
    "TransactionBody",
    "FunctionCall",
    "decode_function_call",
]
