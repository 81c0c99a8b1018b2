"""
Export module for word search puzzles.
Handles writing the answer key and puzzle tables, the JSON solution,
and reading CSV tables back in.
"""

import json
import os
import logging
from typing import Dict, List, Any, Optional, Tuple
from datetime import datetime

from wordfind.grid import PuzzleGrid
from wordfind.lexicon import split_lines


SUPPORTED_FORMATS = ('csv', 'json')


class ExportManager:
    """Manages export of word search puzzles."""
    
    def __init__(self, output_dir: str = "."):
        """Initialize export manager.
        
        Args:
            output_dir: Directory to save exported files
        """
        self.output_dir = output_dir
        self.logger = logging.getLogger(__name__)
        
        os.makedirs(output_dir, exist_ok=True)
    
    def export_csv(self, grid: PuzzleGrid, filename: str) -> str:
        """Export the grid and word list as CSV.
        
        Returns:
            Path to exported file
        """
        output_path = os.path.join(self.output_dir, filename)
        grid.output(output_path)
        return output_path
    
    def export_json(self, grid: PuzzleGrid, filename: Optional[str] = None) -> str:
        """Export the solution, with every word's position, as JSON."""
        if filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"wordsearch_{timestamp}.json"
        
        output_path = os.path.join(self.output_dir, filename)
        
        export_data = {
            'metadata': {
                'type': 'wordsearch',
                'generator': 'wordfindgen',
                'created': datetime.now().isoformat(),
                'version': '1.0'
            },
            'puzzle': grid.to_dict()
        }
        
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(export_data, f, indent=2, ensure_ascii=False)
        
        self.logger.info(f"Exported solution to {output_path}")
        return output_path
    
    @staticmethod
    def read_csv(file_path: str) -> Tuple[List[List[str]], List[str]]:
        """Read a grid and word list back from an exported CSV.
        
        Returns:
            (rows, words): grid rows as lists of cells, and the word list
        """
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            lines = split_lines(f.read())
        
        rows = []
        index = 0
        while index < len(lines) and lines[index]:
            rows.append(lines[index].split(',')[3:])
            index += 1
        
        words = []
        for line in lines[index:]:
            words.extend(field for field in line.split(',') if field)
        
        return rows, words
    
    @staticmethod
    def get_puzzle_statistics(grid: PuzzleGrid) -> Dict[str, Any]:
        """Get statistics about the generated puzzle."""
        total_cells = grid.size * grid.size
        word_cells = sum(len(pw.word) for pw in grid.placed_words)
        
        direction_counts = {}
        for placed_word in grid.placed_words:
            direction = placed_word.direction.value
            direction_counts[direction] = direction_counts.get(direction, 0) + 1
        
        return {
            'grid_size': f"{grid.size}x{grid.size}",
            'total_words': len(grid.placed_words),
            'word_placement_density': word_cells / total_cells if total_cells else 0,
            'direction_distribution': direction_counts
        }
