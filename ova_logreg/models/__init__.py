from .logreg import OneVsAllLogReg

__all__ = ["OneVsAllLogReg"]
