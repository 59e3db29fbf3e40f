TILE_CSS = """
<style>
.scorecard-tile {
  display: flex;
  align-items: center;
  justify-content: center;
  min-height: 120px;
  padding: 8px;
  border: 2px solid #d0d7de;
  border-radius: 6px;
  background: #ffffff;
  font-size: 1.1rem;
  font-weight: 500;
  color: #111827;
  text-align: center;
}
.scorecard-tile.center {
  font-weight: 600;
  font-size: 1.2rem;
  border-color: #93c5fd;
  background: #eff6ff;
}
.scorecard-average {
  display: flex;
  justify-content: space-between;
  border-bottom: 1px solid #e5e7eb;
  padding-bottom: 4px;
  margin-bottom: 8px;
}
</style>
"""
