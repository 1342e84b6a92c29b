from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func as sql_func
from .database import Base

class City(Base):
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False, index=True)
    name_normalized = Column(String, nullable=True, index=True)
    state = Column(String(2), nullable=False, index=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    median_income = Column(Float, nullable=False)
    monthly_cost = Column(Float, nullable=False)
    avg_rent = Column(Float, nullable=False)
    commute_time = Column(Float, nullable=False)
    crime_rate = Column(Float, nullable=True)
    amenities_score = Column(Float, nullable=True)

    # Sub-scores, 0-100. overall is stored as published, not derived.
    affordability_score = Column(Float, nullable=False)
    jobs_score = Column(Float, nullable=False)
    commute_score = Column(Float, nullable=False)
    safety_score = Column(Float, nullable=False)
    lifestyle_score = Column(Float, nullable=False)
    overall_score = Column(Float, nullable=False)

    updated_at = Column(DateTime(timezone=True), server_default=sql_func.now(), onupdate=sql_func.now())

    crime_stats = relationship("CrimeStat", back_populates="city")
    air_quality_stats = relationship("AirQualityStat", back_populates="city")
    transportation_stats = relationship("TransportationStat", back_populates="city")


class CrimeStat(Base):
    __tablename__ = "city_crime_stats"

    id = Column(Integer, primary_key=True, index=True)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False, index=True)
    year = Column(Integer, nullable=False)
    violent_crime_rate = Column(Float, nullable=False)
    property_crime_rate = Column(Float, nullable=False)
    overall_crime_index = Column(Float, nullable=False)

    city = relationship("City", back_populates="crime_stats")

    __table_args__ = (
        UniqueConstraint('city_id', 'year', name='uq_city_crime_year'),
    )


class AirQualityStat(Base):
    __tablename__ = "city_air_quality_stats"

    id = Column(Integer, primary_key=True, index=True)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False, index=True)
    year = Column(Integer, nullable=False)
    avg_annual_aqi = Column(Float, nullable=False)
    avg_annual_pm25 = Column(Float, nullable=False)
    avg_annual_pm10 = Column(Float, nullable=False)
    good_air_days = Column(Integer, nullable=False, default=0)
    unhealthy_air_days = Column(Integer, nullable=False, default=0)

    city = relationship("City", back_populates="air_quality_stats")

    __table_args__ = (
        UniqueConstraint('city_id', 'year', name='uq_city_air_quality_year'),
    )


class TransportationStat(Base):
    __tablename__ = "city_transportation_stats"

    id = Column(Integer, primary_key=True, index=True)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False, index=True)
    year = Column(Integer, nullable=False)
    avg_commute_time_minutes = Column(Float, nullable=False)
    public_transit_usage_percent = Column(Float, nullable=False)
    car_usage_percent = Column(Float, nullable=False)
    car_dependency_score = Column(Float, nullable=False)
    traffic_congestion_index = Column(Float, nullable=False)

    city = relationship("City", back_populates="transportation_stats")

    __table_args__ = (
        UniqueConstraint('city_id', 'year', name='uq_city_transportation_year'),
    )
