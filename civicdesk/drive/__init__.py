"""Drivers, road reports and the shared driver chat."""