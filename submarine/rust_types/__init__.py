"""Rust type names: model, parser, sanitiser and conversion to SCALE schemas."""