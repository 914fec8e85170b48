from .pdf import alpha_stable_pdf, normalize_inputs, pdf_scaled

__all__ = ["alpha_stable_pdf", "normalize_inputs", "pdf_scaled"]
