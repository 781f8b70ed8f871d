from frame_promptly.core.application.ports.function_invoker_port import FunctionInvokerPort
from frame_promptly.core.application.ports.persistence_port import Collection, PersistencePort

__all__ = ["Collection", "FunctionInvokerPort", "PersistencePort"]
