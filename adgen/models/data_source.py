"""
DataSource and DataRow models - tabular input to campaign generation
"""
from sqlalchemy import Column, Integer, String, Enum, JSON, ForeignKey
from sqlalchemy.orm import relationship

from adgen.models.base import BaseModel
from adgen.models.campaign import enum_values
from adgen.models.enums import DataSourceType


class DataSource(BaseModel):
    """A table of rows ingested from CSV, an API, Google Sheets or manual entry"""

    __tablename__ = "data_sources"

    team_id = Column(String(36), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(Enum(DataSourceType, name="data_source_type", values_callable=enum_values), nullable=False)
    config = Column(JSON, nullable=True)

    rows = relationship("DataRow", back_populates="data_source", order_by="DataRow.row_index")


class DataRow(BaseModel):
    """One row of a data source; row_data maps column name -> scalar or null"""

    __tablename__ = "data_rows"

    data_source_id = Column(String(36), ForeignKey("data_sources.id"), nullable=False, index=True)
    row_data = Column(JSON, nullable=False)
    row_index = Column(Integer, nullable=False)

    data_source = relationship("DataSource", back_populates="rows")
