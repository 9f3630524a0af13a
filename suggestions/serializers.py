from rest_framework import serializers

from compass.constants import GRID_SIZE, Quadrant
from compass.figures import cell_coordinates, occupied_blocks
from compass.grid import get_block_info


class SuggestionCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=120, trim_whitespace=True)
    quadrant = serializers.ChoiceField(choices=Quadrant.choices)
    x = serializers.IntegerField(min_value=-9, max_value=9)
    y = serializers.IntegerField(min_value=-9, max_value=9)
    gridId = serializers.IntegerField(min_value=0, max_value=GRID_SIZE * GRID_SIZE - 1)

    def validate(self, attrs):
        grid_id = attrs["gridId"]
        if cell_coordinates(grid_id) != (attrs["x"], attrs["y"]):
            raise serializers.ValidationError(
                {"gridId": "x and y must be the centre of the selected cell."}
            )
        if grid_id in occupied_blocks():
            raise serializers.ValidationError(
                {"gridId": "This cell already holds a political figure."}
            )
        if attrs["quadrant"] != get_block_info(grid_id)["quadrant"]:
            raise serializers.ValidationError(
                {"quadrant": "Quadrant does not match the selected cell."}
            )
        return attrs
