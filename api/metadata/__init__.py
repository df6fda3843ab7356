"""Front matter and sidecar metadata parsing"""
from metadata.frontmatter_parser import FrontmatterParser
from metadata.normalizer import MetadataNormalizer
from metadata.sidecar_reader import SidecarMetadataReader

__all__ = ['FrontmatterParser', 'MetadataNormalizer', 'SidecarMetadataReader']
