"""JSON-RPC client over websockets, block and runtime models, and metadata and event queries."""