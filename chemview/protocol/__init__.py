from chemview.protocol.frames import FunctionCode, modbus_frame, read_frame, write_frame

__all__ = ["FunctionCode", "modbus_frame", "read_frame", "write_frame"]
