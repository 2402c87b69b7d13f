"""
Get Regions GeoJSON Use Case
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import Feature, FeatureCollection, FeatureProperties


class GetRegionsGeoJsonUseCase:
    """
    FeatureCollection of every region that has a boundary.

    Regions without geometry are left out; event_count is computed live.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[FeatureCollection]:
        async with self.uow:
            regions = await self.uow.regions.list_with_geometry()
            counts = await self.uow.regions.event_counts()

            features = [
                Feature(
                    properties=FeatureProperties(
                        id=str(region.id),
                        code=region.code,
                        name_ar=region.name_ar,
                        name_en=region.name_en,
                        event_count=counts.get(region.id, 0),
                    ),
                    geometry=region.geometry,
                )
                for region in regions
            ]
            return Return.ok(FeatureCollection(features=features))
