"""HTTP surface: report preview, document and PDF download endpoints."""
