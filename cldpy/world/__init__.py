from cldpy.world.assemble import assemble_world
from cldpy.world.model import COLLECTION_ATTRIBUTES, World
from cldpy.world.options import AssemblyOptions

__all__ = ["COLLECTION_ATTRIBUTES", "AssemblyOptions", "World", "assemble_world"]
