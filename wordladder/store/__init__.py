from .snapshot import save_map, load_map, snapshot_info, encode_map, decode_map, SNAPSHOT_VERSION

__all__ = ["save_map", "load_map", "snapshot_info", "encode_map", "decode_map", "SNAPSHOT_VERSION"]
