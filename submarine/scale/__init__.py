"""SCALE codec: byte reader, primitive decoders, schemas and schema-driven decoding."""